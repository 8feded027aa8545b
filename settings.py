# settings.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List

from enigma import EnigmaMachine
from keyboard_and_plugboard import Plugboard
from permutation import ALPHA26
from wheels import make_entry_wheel, make_reflector, make_rotor

ROTOR_COUNT = 3
MAX_PAIRS = 10
REQUIRED_KEYS = {"rotors", "reflector"}


@dataclass(slots=True)
class MachineSettings:
    """Operator-facing machine key.

    Wheels are listed left to right as seen through the window; ring
    settings are 1-based, as printed on the ring.
    """

    rotors: List[str]
    reflector: str = "B"
    etw: str = "ALPHA"
    ring_set: List[int] = field(default_factory=lambda: [1] * ROTOR_COUNT)
    notch_map: Dict[str, str] = field(default_factory=dict)
    plugs: List[str] = field(default_factory=list)
    start: str = "A" * ROTOR_COUNT

    def validate(self, alphabet: str = ALPHA26) -> None:
        if len(self.rotors) != ROTOR_COUNT:
            raise ValueError(f"Need exactly {ROTOR_COUNT} rotors, got {len(self.rotors)}")
        if len(self.ring_set) != ROTOR_COUNT:
            raise ValueError("ring_set length mismatch")
        hi = len(alphabet)
        if not all(isinstance(r, int) and 1 <= r <= hi for r in self.ring_set):
            raise ValueError(f"Ring settings must be numbers in 1–{hi}")
        if len(self.start) != ROTOR_COUNT or not set(self.start) <= set(alphabet):
            raise ValueError(f"start must be {ROTOR_COUNT} letters from the alphabet")
        if len(self.plugs) > MAX_PAIRS:
            raise ValueError(f"Too many plug pairs (max {MAX_PAIRS})")
        unknown = set(self.notch_map) - set(self.rotors)
        if unknown:
            raise ValueError(f"notch_map names rotors not in use: {sorted(unknown)}")

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
        known = {k: data[k] for k in cls.__dataclass_fields__ if k in data}
        plugs = known.get("plugs")
        if isinstance(plugs, str):
            known["plugs"] = plugs.upper().split()
        if "start" in known:
            known["start"] = known["start"].upper()
        return cls(**known)

    def to_dict(self) -> dict:
        return asdict(self)


# Settings of the stock simulator: three rotor I wheels carrying on Z,
# UKW-B, straight entry wheel, no plugs.
def reference_settings() -> MachineSettings:
    return MachineSettings(rotors=["I", "I", "I"], reflector="B", notch_map={"I": "Z"})


# ────────────────────────────────────────────────────────────────────────
#  JSON helpers
# ────────────────────────────────────────────────────────────────────────


def load_settings(path: str | Path) -> MachineSettings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return MachineSettings.from_dict(data)


def save_settings(settings: MachineSettings, path: str | Path) -> None:
    Path(path).write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")


# ────────────────────────────────────────────────────────────────────────
#  Assembly
# ────────────────────────────────────────────────────────────────────────


def build_machine(settings: MachineSettings, **kw) -> EnigmaMachine:
    """Assemble a machine; *kw* is passed through (e.g. ``observer``).

    The engine wants the rightmost wheel first and 0-based offsets, so
    the window-order lists are reversed here.
    """
    alphabet = ALPHA26
    settings.validate(alphabet)

    rotors = [
        make_rotor(
            name,
            notches=settings.notch_map.get(name),
            position=alphabet.index(letter),
            ring_setting=ring - 1,
        )
        for name, letter, ring in zip(settings.rotors, settings.start, settings.ring_set)
    ]
    rotors.reverse()

    return EnigmaMachine(
        rotors,
        make_reflector(settings.reflector),
        make_entry_wheel(settings.etw),
        Plugboard(settings.plugs, alphabet),
        **kw,
    )


def reference_machine(**kw) -> EnigmaMachine:
    return build_machine(reference_settings(), **kw)
