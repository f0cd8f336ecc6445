import pytest

from rustlings.exercises.conditionals import animal_habitat, bigger, foo_if_fizz


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(42, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


@pytest.mark.parametrize(
    ("animal", "habitat"),
    [
        ("gopher", "Burrow"),
        ("snake", "Desert"),
        ("crab", "Beach"),
        ("dinosaur", "Unknown"),
    ],
)
def test_animal_habitat(animal, habitat):
    assert animal_habitat(animal) == habitat