# permutation.py
from __future__ import annotations

import string
from collections import Counter
from typing import Iterable, Sequence

from errors import InvalidWiringError

ALPHA26 = string.ascii_uppercase


class Permutation:
    """An invertible substitution over the integers ``0..N-1``.

    Built from a wiring string: the i-th symbol is the image of the i-th
    alphabet letter. Both lookup directions are precomputed, so
    ``forward`` and ``inverse`` are plain table reads.
    """

    __slots__ = ("alphabet", "size", "_fwd", "_rev")

    def __init__(self, wiring: str | Sequence[int], alphabet: str = ALPHA26) -> None:
        self.alphabet = alphabet
        self.size = len(alphabet)

        if isinstance(wiring, str):
            _check_wiring(wiring, alphabet)
            fwd = [alphabet.index(c) for c in wiring]
        else:
            fwd = list(wiring)
            try:
                ok = sorted(fwd) == list(range(self.size))
            except TypeError:
                ok = False
            if not ok:
                raise InvalidWiringError(
                    f"table must hold each of 0..{self.size - 1} exactly once"
                )

        rev = [0] * self.size
        for i, j in enumerate(fwd):
            rev[j] = i

        self._fwd: tuple[int, ...] = tuple(fwd)
        self._rev: tuple[int, ...] = tuple(rev)

    @classmethod
    def identity(cls, alphabet: str = ALPHA26) -> "Permutation":
        return cls(alphabet, alphabet)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, int]], alphabet: str = ALPHA26) -> "Permutation":
        """Identity with each ``(a, b)`` swapped; callers vet the pairs."""
        table = list(range(len(alphabet)))
        for a, b in pairs:
            table[a], table[b] = b, a
        return cls(table, alphabet)

    # ── lookups ──────────────────────────────────────────────────
    def forward(self, i: int) -> int:
        return self._fwd[i]

    def inverse(self, j: int) -> int:
        return self._rev[j]

    @property
    def forward_table(self) -> tuple[int, ...]:
        return self._fwd

    @property
    def inverse_table(self) -> tuple[int, ...]:
        return self._rev

    # ── structure ────────────────────────────────────────────────
    def is_involution(self) -> bool:
        return self._fwd == self._rev

    def fixed_points(self) -> list[int]:
        return [i for i, j in enumerate(self._fwd) if i == j]

    @property
    def wiring(self) -> str:
        return "".join(self.alphabet[j] for j in self._fwd)

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.alphabet == other.alphabet and self._fwd == other._fwd

    def __hash__(self) -> int:
        return hash((self.alphabet, self._fwd))

    def __repr__(self) -> str:
        return f"<Permutation {self.wiring}>"


def _check_wiring(wiring: str, alphabet: str) -> None:
    if len(wiring) != len(alphabet):
        raise InvalidWiringError(
            f"wiring has {len(wiring)} symbols, alphabet has {len(alphabet)}"
        )
    counts = Counter(wiring)
    dupes = sorted(c for c, n in counts.items() if n > 1)
    missing = sorted(set(alphabet) - counts.keys())
    if dupes or missing:
        parts = []
        if dupes:
            parts.append(f"duplicated {''.join(dupes)}")
        if missing:
            parts.append(f"missing {''.join(missing)}")
        raise InvalidWiringError("wiring is not a permutation of alphabet: " + ", ".join(parts))
