from valuetransformer import flip
from valuetransformer.laws import flip_involution_holds, reverse_composition_holds, round_trips

from fakes import string_int


def test_flip_involution() -> None:
    for value in ["1", "1.5", "-3"]:
        assert flip_involution_holds(string_int, value)
    assert flip_involution_holds(flip(string_int), 7)


def test_reverse_composition() -> None:
    for value in ["4", "4.5"]:
        assert reverse_composition_holds(string_int, flip(string_int), value)


def test_round_trips() -> None:
    assert round_trips(string_int, "7")
    # "07" parses to 7, which formats back to "7"
    assert not round_trips(string_int, "07")
    assert not round_trips(string_int, "7.5")
