import math
from itertools import permutations

import pytest

from drillbook.triangle import Kind, is_invalid_side, kind_from_sides


def test_equilateral():
    assert kind_from_sides(2, 2, 2) is Kind.EQUILATERAL


def test_isosceles():
    assert kind_from_sides(3, 4, 4) is Kind.ISOSCELES


def test_scalene():
    assert kind_from_sides(5, 4, 6) is Kind.SCALENE


def test_degenerate_triangle_counts_as_isosceles():
    assert kind_from_sides(1, 1, 2) is Kind.ISOSCELES


@pytest.mark.parametrize(
    "sides",
    [(1, 1, 3), (0, 0, 0), (-1, 2, 2), (math.nan, 1, 1), (math.inf, math.inf, math.inf), (7, 3, 2)],
)
def test_not_a_triangle(sides):
    assert kind_from_sides(*sides) is Kind.NOT_A_TRIANGLE


@pytest.mark.parametrize("sides", [(3, 4, 4), (5, 4, 6), (1, 1, 3), (0.5, 0.4, 0.6)])
def test_order_of_sides_does_not_matter(sides):
    kinds = {kind_from_sides(*order) for order in permutations(sides)}
    assert kinds == {kind_from_sides(*sides)}


@pytest.mark.parametrize("side", [0, -1, -0.0, math.nan, math.inf, -math.inf])
def test_invalid_sides(side):
    assert is_invalid_side(side) is True


@pytest.mark.parametrize("side", [1, 0.001, 1e300])
def test_valid_sides(side):
    assert is_invalid_side(side) is False