import pytest

from errors import EnigmaError, InvalidReflectorError, InvalidWiringError
from permutation import ALPHA26
from rotor_and_reflector import EntryWheel, Reflector, Rotor

UKW_B = "YRUHQSLDPXNGOKMIEBFZCWVJAT"
ROTOR_I = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"


def test_round_trip_at_every_position_and_ring():
    rotor = Rotor(ROTOR_I)
    for ring in (0, 1, 13):
        rotor.set_ring(ring)
        for pos in range(26):
            rotor.position = pos
            for x in range(26):
                assert rotor.connect_backward(rotor.connect_forward(x)) == x


def test_forward_follows_position():
    rotor = Rotor(ROTOR_I)
    assert rotor.connect_forward(0) == ALPHA26.index("E")
    rotor.position = 1
    # contact B is wired to K, which leaves one place lower as J
    assert rotor.connect_forward(0) == ALPHA26.index("J")


def test_identity_rotor_ignores_position():
    rotor = Rotor(ALPHA26, ring_setting=7)
    for pos in range(26):
        rotor.position = pos
        assert [rotor.connect_forward(x) for x in range(26)] == list(range(26))


def test_rotate_without_turnover_stays_put():
    rotor = Rotor(ALPHA26, [0, 1, 2], position=0)
    assert rotor.rotate(False) is False
    assert rotor.position == 0


def test_rotate_reports_landing_on_notch():
    rotor = Rotor(ALPHA26, [2])
    assert rotor.rotate(True) is False
    assert rotor.position == 1
    assert rotor.rotate(True) is True
    assert rotor.position == 2


def test_rotate_wraps():
    rotor = Rotor(ALPHA26, [0], position=25)
    assert rotor.rotate(True) is True
    assert rotor.position == 0
    assert rotor.window == "A"


def test_position_and_ring_taken_mod_n():
    rotor = Rotor(ROTOR_I, position=27, ring_setting=-1)
    assert rotor.position == 1
    assert rotor.ring_setting == 25


def test_bad_notch_rejected():
    with pytest.raises(ValueError):
        Rotor(ROTOR_I, [26])
    with pytest.raises(ValueError):
        Rotor.from_letters(ROTOR_I, "1")


def test_from_letters():
    rotor = Rotor.from_letters(ROTOR_I, "QZ", name="I")
    assert rotor.notches == {16, 25}
    assert "I" in repr(rotor)


def test_bad_rotor_wiring():
    with pytest.raises(InvalidWiringError):
        Rotor("ABC")


def test_entry_wheel_round_trip():
    etw = EntryWheel("QWERTYUIOPASDFGHJKLZXCVBNM")
    assert etw.connect_forward(0) == ALPHA26.index("Q")
    for x in range(26):
        assert etw.connect_backward(etw.connect_forward(x)) == x
    straight = EntryWheel()
    assert [straight.connect_forward(x) for x in range(26)] == list(range(26))


def test_reflector_is_fixed_point_free_involution():
    ukw = Reflector(UKW_B)
    for i in range(26):
        assert ukw.reflect(ukw.reflect(i)) == i
        assert ukw.reflect(i) != i
    assert ukw.reflect(0) == ALPHA26.index("Y")


def test_reflector_rejects_non_involution():
    with pytest.raises(InvalidReflectorError, match="involution"):
        Reflector(ROTOR_I)


def test_reflector_rejects_fixed_points():
    # swap every pair except A and B, which map to themselves
    wiring = "AB" + "".join(ALPHA26[i + 1] + ALPHA26[i] for i in range(2, 26, 2))
    with pytest.raises(InvalidReflectorError, match="AB"):
        Reflector(wiring)


def test_reflector_errors_are_value_errors():
    with pytest.raises(ValueError):
        Reflector(ALPHA26)
    assert issubclass(InvalidReflectorError, EnigmaError)
    with pytest.raises(InvalidWiringError):
        Reflector("YRU")
