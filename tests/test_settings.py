import json

import pytest

from errors import InvalidWiringError
from settings import (
    MachineSettings,
    build_machine,
    load_settings,
    reference_machine,
    reference_settings,
    save_settings,
)
from wheels import make_entry_wheel, make_reflector, make_rotor


def test_load_fills_defaults(tmp_path):
    path = tmp_path / "key.json"
    path.write_text(json.dumps({"rotors": ["II", "IV", "V"], "reflector": "C", "plugs": "ab cd"}))
    cfg = load_settings(path)
    assert cfg.rotors == ["II", "IV", "V"]
    assert cfg.ring_set == [1, 1, 1]
    assert cfg.start == "AAA"
    assert cfg.plugs == ["AB", "CD"]


def test_save_then_load(tmp_path):
    cfg = MachineSettings(rotors=["III", "I", "II"], reflector="A", ring_set=[5, 6, 7],
                          plugs=["QW"], start="ZZY", etw="QWERTZ")
    path = tmp_path / "key.json"
    save_settings(cfg, path)
    assert load_settings(path) == cfg


def test_missing_keys(tmp_path):
    path = tmp_path / "key.json"
    path.write_text(json.dumps({"rotors": ["I", "II", "III"]}))
    with pytest.raises(ValueError, match="reflector"):
        load_settings(path)


def test_not_an_object(tmp_path):
    path = tmp_path / "key.json"
    path.write_text("[]")
    with pytest.raises(ValueError):
        load_settings(path)


@pytest.mark.parametrize(
    "changes",
    [
        {"rotors": ["I", "II"]},
        {"ring_set": [0, 1, 1]},
        {"ring_set": [1, 1]},
        {"start": "AA"},
        {"start": "A1A"},
        {"plugs": [a + b for a, b in zip("ABCDEFGHIJK", "NOPQRSTUVWX")]},
        {"notch_map": {"IV": "A"}},
        {"reflector": "Z"},
        {"rotors": ["I", "II", "IX"]},
        {"etw": "DVORAK"},
    ],
)
def test_bad_settings_rejected(changes):
    data = {"rotors": ["I", "II", "III"], "reflector": "B", **changes}
    with pytest.raises(ValueError):
        build_machine(MachineSettings.from_dict(data))


def test_bad_plug_is_a_wiring_error():
    cfg = MachineSettings(rotors=["I", "II", "III"], plugs=["AB", "BC"])
    with pytest.raises(InvalidWiringError):
        build_machine(cfg)


def test_notch_override():
    cfg = MachineSettings(rotors=["I", "II", "III"], notch_map={"III": "B"})
    machine = build_machine(cfg)
    machine.keydown()
    assert machine.positions == (1, 1, 0)


def test_reference_machine():
    machine = reference_machine()
    assert machine.positions == (0, 0, 0)
    assert all(r.notches == {25} for r in machine.rotors)
    assert machine.reflector.wiring.wiring == "YRUHQSLDPXNGOKMIEBFZCWVJAT"
    assert reference_settings().notch_map == {"I": "Z"}


def test_reference_settings_are_not_shared():
    tweaked = reference_settings()
    tweaked.plugs.append("AB")
    tweaked.start = "QQQ"
    assert reference_settings().plugs == []
    machine = reference_machine()
    assert len(machine.pb) == 0
    assert machine.positions == (0, 0, 0)


def test_presets_are_fresh_objects():
    a, b = make_rotor("I"), make_rotor("i")
    a.position = 5
    assert b.position == 0
    assert a.notches == {17}      # landing letter R
    assert make_reflector("b").reflect(0) == 24
    assert make_entry_wheel("QWERTZ").connect_forward(0) == 16
