"""Classification of triangles by the lengths of their sides."""

from __future__ import annotations

import math
from enum import IntEnum


class Kind(IntEnum):
    """The kinds of triangle, including not being one at all."""

    NOT_A_TRIANGLE = 0
    EQUILATERAL = 1
    ISOSCELES = 2
    SCALENE = 3


def is_invalid_side(n: float) -> bool:
    """Tell whether ``n`` cannot be the length of a side."""
    return n <= 0 or math.isnan(n) or math.isinf(n)


def kind_from_sides(a: float, b: float, c: float) -> Kind:
    """Classify the triangle with sides ``a``, ``b`` and ``c``."""
    if any(is_invalid_side(side) for side in (a, b, c)):
        return Kind.NOT_A_TRIANGLE
    if a == b == c:
        return Kind.EQUILATERAL
    if a + b < c or a + c < b or b + c < a:
        return Kind.NOT_A_TRIANGLE
    if a == b or b == c or c == a:
        return Kind.ISOSCELES
    return Kind.SCALENE