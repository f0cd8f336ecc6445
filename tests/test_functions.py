import pytest

from rustlings.exercises.functions import is_even, sale_price, square


@pytest.mark.parametrize("num", [0, 2, -4, 100])
def test_is_even_true(num):
    assert is_even(num) is True


@pytest.mark.parametrize("num", [1, -3, 51])
def test_is_even_false(num):
    assert is_even(num) is False


def test_sale_price_odd():
    assert sale_price(51) == 48


def test_sale_price_even():
    assert sale_price(50) == 40


def test_sale_price_is_always_lower():
    for price in range(-5, 60):
        assert sale_price(price) < price


def test_square_of_three():
    assert square(3) == 9


def test_square_is_symmetric():
    for num in range(-10, 11):
        assert square(num) == square(-num)
        assert square(num) >= 0