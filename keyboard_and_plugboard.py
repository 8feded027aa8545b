# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import InvalidSymbolError, InvalidWiringError
from permutation import ALPHA26, Permutation

debug = Debug()


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHA26) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            sig = self.alpha_to_index[letter]
        except (KeyError, TypeError):
            raise InvalidSymbolError(
                f"Invalid character {letter!r} for current alphabet."
            ) from None
        debug.log("keyboard", "%r->%d", letter, sig)
        return sig

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise InvalidSymbolError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]

    def __contains__(self, letter: object) -> bool:
        return letter in self.alpha_to_index


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    """Symmetric swap board; the same table serves both directions."""

    def __init__(
        self,
        pairs: Sequence[str | tuple[str, str]] = (),
        alphabet: str = ALPHA26,
    ) -> None:
        self.alphabet: str = alphabet
        used: set[str] = set()
        swaps: list[tuple[str, str]] = []

        for raw in pairs:
            # normalise to (a, b)
            if len(raw) != 2:
                raise InvalidWiringError(f"Pair {raw!r} must be exactly 2 symbols")
            a, b = raw
            if not all(isinstance(s, str) and len(s) == 1 for s in (a, b)):
                raise InvalidWiringError(f"Pair {raw!r} must join two single symbols")

            if a == b:
                raise InvalidWiringError(f"Plugboard cannot map a symbol to itself: {a}")
            if a not in alphabet or b not in alphabet:
                bad = a if a not in alphabet else b
                raise InvalidWiringError(f"Symbol {bad!r} not in alphabet")
            if a in used or b in used:
                dup = a if a in used else b
                raise InvalidWiringError(f"Character {dup!r} already used in plugboard")

            swaps.append((a, b))
            used.update((a, b))

        self.pairs: tuple[tuple[str, str], ...] = tuple(swaps)
        self.wiring = Permutation.from_pairs(
            ((alphabet.index(a), alphabet.index(b)) for a, b in swaps), alphabet
        )

    @classmethod
    def from_string(cls, text: str, alphabet: str = ALPHA26) -> "Plugboard":
        """Parse the usual ``"AB CD EF"`` notation."""
        return cls(text.upper().split(), alphabet)

    def forward(self, signal: int) -> int:
        mapped = self.wiring.forward(signal)
        debug.log("plugboard", "%s->%s", self.alphabet[signal], self.alphabet[mapped])
        return mapped

    backward = forward       # self-inverse

    def __len__(self) -> int:
        return len(self.pairs)

    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self.pairs]
        return f"<Plugboard {' '.join(swaps)}>"
