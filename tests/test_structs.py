import pytest

from rustlings.exercises.structs import Package


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="below 10 grams"):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    cents_per_gram = 3
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000