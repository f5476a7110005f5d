import pytest

from drillbook.numbers import (
    collatz_steps,
    difference,
    grains_on_square,
    is_leap_year,
    square_of_sum,
    sum_of_squares,
    to_roman,
    total_grains,
)

_ROMAN = {"M": 1000, "D": 500, "C": 100, "L": 50, "X": 10, "V": 5, "I": 1}


def _parse_roman(numeral):
    total = 0
    for char, following in zip(numeral, numeral[1:] + " "):
        value = _ROMAN[char]
        total += -value if _ROMAN.get(following, 0) > value else value
    return total


@pytest.mark.parametrize("power", range(20))
def test_collatz_of_power_of_two(power):
    assert collatz_steps(2**power) == power


@pytest.mark.parametrize("n", range(2, 200))
def test_collatz_step_relation(n):
    following = 3 * n + 1 if n % 2 else n // 2
    assert collatz_steps(n) == collatz_steps(following) + 1


@pytest.mark.parametrize("n", [0, -1, -15])
def test_collatz_rejects_non_positive(n):
    with pytest.raises(ValueError, match="greater than zero"):
        collatz_steps(n)


def test_difference_of_ten():
    assert difference(10) == 2640


@pytest.mark.parametrize("n", range(60))
def test_square_of_sum_grows_by_cubes(n):
    assert square_of_sum(n + 1) - square_of_sum(n) == (n + 1) ** 3


@pytest.mark.parametrize("n", range(60))
def test_sum_of_squares_grows_by_squares(n):
    assert sum_of_squares(n + 1) - sum_of_squares(n) == (n + 1) ** 2


@pytest.mark.parametrize("n", range(0, 120, 7))
def test_difference_matches_its_parts(n):
    assert difference(n) == square_of_sum(n) - sum_of_squares(n)


def test_sums_start_at_zero():
    assert (square_of_sum(0), sum_of_squares(0), difference(0)) == (0, 0, 0)


def test_first_square_has_one_grain():
    assert grains_on_square(1) == 1


@pytest.mark.parametrize("n", range(1, 64))
def test_grains_double_each_square(n):
    assert grains_on_square(n + 1) == 2 * grains_on_square(n)


def test_total_is_sum_of_all_squares():
    total = total_grains()
    assert total == sum(grains_on_square(n) for n in range(1, 65))
    assert (total + 1) & total == 0


@pytest.mark.parametrize("n", [0, -1, 65])
def test_grains_outside_board(n):
    with pytest.raises(ValueError, match="between 1 and 64"):
        grains_on_square(n)


def test_century_not_divisible_by_400_is_common():
    assert is_leap_year(1900) is False


def test_years_divisible_by_400_are_leap():
    assert all(is_leap_year(year) for year in range(0, 4000, 400))


def test_odd_years_are_never_leap():
    assert not any(is_leap_year(year) for year in range(1, 4001, 2))


@pytest.mark.parametrize("year", range(1890, 2030))
def test_leap_years_repeat_every_400_years(year):
    assert is_leap_year(year) == is_leap_year(year + 400)


def test_roman_numeral_pin():
    assert to_roman(1990) == "MCMXC"


def test_roman_numerals_round_trip():
    assert all(_parse_roman(to_roman(n)) == n for n in range(1, 3001))


@pytest.mark.parametrize("number", [0, -5, 3001])
def test_roman_out_of_bounds(number):
    with pytest.raises(ValueError, match="Out of bounds"):
        to_roman(number)