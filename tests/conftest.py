import pytest

from permutation import ALPHA26
from rotor_and_reflector import Reflector, Rotor
from settings import MachineSettings, build_machine

UKW_B = "YRUHQSLDPXNGOKMIEBFZCWVJAT"


@pytest.fixture
def ukw_b():
    return Reflector(UKW_B)


@pytest.fixture
def identity_rotors():
    # chain order: rightmost first, only the rightmost carries (on Z)
    return [Rotor(ALPHA26, [25]), Rotor(ALPHA26), Rotor(ALPHA26)]


@pytest.fixture
def army_settings():
    return MachineSettings(rotors=["I", "II", "III"], reflector="B")


@pytest.fixture
def army_machine(army_settings):
    return build_machine(army_settings)
