# rotor_and_reflector.py
from __future__ import annotations

from typing import Iterable

from debug import Debug
from errors import InvalidReflectorError
from permutation import ALPHA26, Permutation

debug = Debug()


class Rotor:
    def __init__(
        self,
        wiring: str | Permutation,
        notches: Iterable[int] = (),
        *,
        position: int = 0,
        ring_setting: int = 0,
        alphabet: str = ALPHA26,
        name: str | None = None,
    ) -> None:
        self.wiring = wiring if isinstance(wiring, Permutation) else Permutation(wiring, alphabet)
        self.alphabet = self.wiring.alphabet
        self.size = self.wiring.size
        self.name = name

        notch_set = frozenset(notches)
        bad = sorted(n for n in notch_set if not 0 <= n < self.size)
        if bad:
            raise ValueError(f"Notch positions {bad} outside 0..{self.size - 1}")
        self.notches = notch_set

        self.position = position % self.size
        self.ring_setting = ring_setting % self.size

    # ── ring & notch helpers ──────────────────────────────────────
    @classmethod
    def from_letters(cls, wiring: str, notches: str, alphabet: str = ALPHA26, **kw) -> "Rotor":
        """Build a rotor whose notches are given as window letters."""
        if not set(notches) <= set(alphabet):
            raise ValueError("Notch characters must be in the alphabet")
        return cls(wiring, [alphabet.index(c) for c in notches], alphabet=alphabet, **kw)

    def set_ring(self, ring: int) -> "Rotor":
        self.ring_setting = ring % self.size
        return self

    @property
    def window(self) -> str:
        """Letter currently showing in the machine's window."""
        return self.alphabet[self.position]

    # ── stepping --------------------------------------------------
    def rotate(self, turnover: bool) -> bool:
        """Step once if *turnover* is set; return True when the step lands on a notch."""
        if not turnover:
            return False
        self.position = (self.position + 1) % self.size
        hit = self.position in self.notches
        debug.log("stepping", "%s pos %d, notch_hit=%s", self.name or "rotor", self.position, hit)
        return hit

    # ── signal paths ---------------------------------------------
    def connect_forward(self, sig: int) -> int:
        shift = (sig + self.position - self.ring_setting) % self.size
        mapped = self.wiring.forward(shift)
        out = (mapped - self.position + self.ring_setting) % self.size
        debug.log("rotor", "%s fwd %d->%d", self.name or "rotor", sig, out)
        return out

    def connect_backward(self, sig: int) -> int:
        shift = (sig + self.position - self.ring_setting) % self.size
        mapped = self.wiring.inverse(shift)
        out = (mapped - self.position + self.ring_setting) % self.size
        debug.log("rotor", "%s bck %d->%d", self.name or "rotor", sig, out)
        return out

    def __repr__(self) -> str:
        label = f" {self.name}" if self.name else ""
        return f"<Rotor{label} pos={self.position} ring={self.ring_setting}>"


class EntryWheel:
    """Fixed wheel between the plugboard and the rotor stack (ETW)."""

    def __init__(self, wiring: str | Permutation | None = None, alphabet: str = ALPHA26) -> None:
        if wiring is None:
            wiring = Permutation.identity(alphabet)
        self.wiring = wiring if isinstance(wiring, Permutation) else Permutation(wiring, alphabet)
        self.alphabet = self.wiring.alphabet
        self.size = self.wiring.size

    def connect_forward(self, sig: int) -> int:
        return self.wiring.forward(sig)

    def connect_backward(self, sig: int) -> int:
        return self.wiring.inverse(sig)

    def __repr__(self) -> str:
        return f"<EntryWheel {self.wiring.wiring}>"


class Reflector:
    def __init__(self, wiring: str | Permutation, alphabet: str = ALPHA26) -> None:
        perm = wiring if isinstance(wiring, Permutation) else Permutation(wiring, alphabet)

        # w[i] = j ⇒ w[j] = i, and no symbol wired to itself
        if not perm.is_involution():
            raise InvalidReflectorError("Reflector wiring must be an involution")
        fixed = perm.fixed_points()
        if fixed:
            letters = "".join(perm.alphabet[i] for i in fixed)
            raise InvalidReflectorError(f"Reflector wiring maps {letters} to itself")

        self.wiring = perm
        self.alphabet = perm.alphabet
        self.size = perm.size

    def reflect(self, sig: int) -> int:
        out = self.wiring.forward(sig)
        debug.log("reflector", "%d->%d", sig, out)
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring.wiring}>"
