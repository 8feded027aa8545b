# enigma.py  ─────────────────────────────────────────────────────────
from __future__ import annotations

from typing import Callable, Iterable, Sequence

from debug import Debug
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import EntryWheel, Reflector, Rotor

debug = Debug()

Observer = Callable[[str, int], None]


class EnigmaMachine:
    """Plugboard → ETW → rotors → reflector → rotors → ETW → plugboard.

    ``rotors`` are in chain order: the first one is the rightmost wheel,
    which receives the signal first and steps on every key press.
    """

    def __init__(
        self,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        etw: EntryWheel | None = None,
        plugboard: Plugboard | None = None,
        *,
        keyboard: Keyboard | None = None,
        observer: Observer | None = None,
    ) -> None:
        if not rotors:
            raise ValueError("machine needs at least one rotor")

        alphabet = reflector.alphabet
        self.kb = keyboard or Keyboard(alphabet)
        self.pb = plugboard or Plugboard((), alphabet)
        self.etw = etw or EntryWheel(None, alphabet)
        self.rotors: list[Rotor] = list(rotors)
        self.reflector = reflector
        self.observer = observer

        parts = [self.pb, self.etw, *self.rotors]
        alphabets = {self.kb.alphabet, reflector.alphabet}
        alphabets.update(p.alphabet for p in parts)
        if len(alphabets) != 1:
            raise ValueError(f"components disagree on alphabet: {sorted(alphabets)}")

        self._initial = self.positions

    # ── state helpers ───────────────────────────────────────────
    @property
    def alphabet(self) -> str:
        return self.kb.alphabet

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    def set_positions(self, positions: Iterable[int]) -> None:
        positions = list(positions)
        if len(positions) != len(self.rotors):
            raise ValueError("positions length mismatch")
        for rotor, pos in zip(self.rotors, positions):
            rotor.position = pos % rotor.size

    def reset(self) -> None:
        """Return every rotor to the position it had at assembly."""
        self.set_positions(self._initial)

    # ── stepping logic  ─────────────────────────────────────────
    def keydown(self) -> None:
        """Advance the rotors for one key press, rightmost first."""
        turnover = True
        for rotor in self.rotors:
            turnover = rotor.rotate(turnover)
        debug.log("stepping", "positions %s", self.positions)

    # ── encipher one symbol  ────────────────────────────────────
    def cipher_one(self, letter: str) -> str:
        """Encipher *letter* at the current rotor positions, without stepping."""
        signal = self.kb.forward(letter)

        signal = self._trace("plugboard", self.pb.forward(signal))
        signal = self._trace("etw", self.etw.connect_forward(signal))

        for n, rotor in enumerate(self.rotors):
            signal = self._trace(f"rotor-{n}", rotor.connect_forward(signal))

        signal = self._trace("reflector", self.reflector.reflect(signal))

        for n in reversed(range(len(self.rotors))):
            signal = self._trace(f"rotor-{n}-back", self.rotors[n].connect_backward(signal))

        signal = self._trace("etw-back", self.etw.connect_backward(signal))
        signal = self._trace("plugboard-back", self.pb.backward(signal))

        out_ch = self.kb.backward(signal)
        debug.log("encipher", "%s->%s at %s", letter, out_ch, self.positions)
        return out_ch

    def press(self, letter: str) -> str:
        """One keystroke: step, then encipher. Bad input leaves the rotors alone."""
        self.kb.forward(letter)              # raises InvalidSymbolError
        self.keydown()
        return self.cipher_one(letter)

    def encipher(self, text: str) -> str:
        return "".join(self.press(ch) for ch in text)

    def _trace(self, stage: str, signal: int) -> int:
        if self.observer is not None:
            self.observer(stage, signal)
        return signal

    def __repr__(self) -> str:
        window = "".join(r.window for r in reversed(self.rotors))
        return f"<EnigmaMachine window={window} rotors={len(self.rotors)}>"
