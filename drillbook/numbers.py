"""Number exercises: Collatz steps, square sums, grains, leap years, numerals."""

from __future__ import annotations

_CHESS_MIN = 1
_CHESS_MAX = 64

_ROMAN_VALUES = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)


def collatz_steps(n: int) -> int:
    """Count the Collatz steps needed to bring ``n`` down to 1.

    Raises ValueError when ``n`` is not positive.
    """
    if n <= 0:
        raise ValueError("Value must be greater than zero")
    steps = 0
    while n != 1:
        n = 3 * n + 1 if n % 2 else n // 2
        steps += 1
    return steps


def square_of_sum(n: int) -> int:
    """Return the square of the sum of the first ``n`` natural numbers."""
    total = n * (n + 1) // 2
    return total * total


def sum_of_squares(n: int) -> int:
    """Return the sum of the squares of the first ``n`` natural numbers."""
    return n * (n + 1) * (2 * n + 1) // 6


def difference(n: int) -> int:
    """Return the square of the sum minus the sum of the squares."""
    return n * (n + 1) * (3 * n * (n + 1) - 2 * (2 * n + 1)) // 12


def grains_on_square(n: int) -> int:
    """Return the number of grains on square ``n`` of a chessboard.

    Raises ValueError when ``n`` is outside 1 to 64.
    """
    if not _CHESS_MIN <= n <= _CHESS_MAX:
        raise ValueError("Square must be between 1 and 64")
    return 1 << (n - 1)


def total_grains() -> int:
    """Return the number of grains on the whole chessboard."""
    return (1 << _CHESS_MAX) - 1


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a leap year in the Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def to_roman(number: int) -> str:
    """Write ``number`` as a Roman numeral.

    Raises ValueError for numbers outside 1 to 3000.
    """
    if not 1 <= number <= 3000:
        raise ValueError("Out of bounds")
    parts = []
    remaining = number
    for symbol, value in _ROMAN_VALUES:
        count, remaining = divmod(remaining, value)
        parts.append(symbol * count)
    return "".join(parts)