# wheels.py
"""Named wheel presets.

Entries are plain data (wiring, notch letters); ``make_*`` hands out a
fresh object every call so machines never share rotor state.

Notch letters are *landing* positions: the letter in the window right
after the wheel has carried. Rotor I historically turns its neighbour
while moving Q→R, so its notch here is ``R``.
"""
from __future__ import annotations

from typing import Dict, Tuple

from permutation import ALPHA26
from rotor_and_reflector import EntryWheel, Reflector, Rotor

# ────────────────────────────────────────────────────────────────────────
#  Wheel database
# ────────────────────────────────────────────────────────────────────────

ROTORS: Dict[str, Tuple[str, str]] = {
    "I":   ("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "R"),
    "II":  ("AJDKSIRUXBLHWTMCQGZNPYFVOE", "F"),
    "III": ("BDFHJLCPRTXVZNYEIWGAKMUSQO", "W"),
    "IV":  ("ESOVPZJAYQUIRHXLNFTGKDCMWB", "K"),
    "V":   ("VZBRGITYUPSDNHLXAWMJQOFECK", "A"),
}

REFLECTORS: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}

ENTRY_WHEELS: Dict[str, str] = {
    "ALPHA":  ALPHA26,
    "QWERTZ": "QWERTYUIOPASDFGHJKLZXCVBNM",
}

def _lookup(table: dict, name: str, kind: str):
    try:
        return table[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown {kind} {name!r}. Expected one of {sorted(table)}") from None


def make_rotor(name: str, *, notches: str | None = None, position: int = 0, ring_setting: int = 0) -> Rotor:
    """Fresh preset rotor; *notches* overrides the stock notch letters."""
    wiring, stock = _lookup(ROTORS, name, "rotor")
    return Rotor.from_letters(
        wiring,
        stock if notches is None else notches,
        position=position,
        ring_setting=ring_setting,
        name=name.upper(),
    )


def make_reflector(name: str) -> Reflector:
    return Reflector(_lookup(REFLECTORS, name, "reflector"))


def make_entry_wheel(name: str) -> EntryWheel:
    return EntryWheel(_lookup(ENTRY_WHEELS, name, "entry wheel"))


__all__ = [
    "ROTORS",
    "REFLECTORS",
    "ENTRY_WHEELS",
    "make_rotor",
    "make_reflector",
    "make_entry_wheel",
]
