"""Check-digit validation for ISBN-10 numbers and the Luhn formula."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")


def is_valid_isbn(text: str) -> bool:
    """Tell whether ``text`` is a valid ISBN-10, with or without hyphens.

    The last of the ten characters may be ``X``, standing for ten.
    """
    if len(text.encode()) < 10:
        return False
    weight = 10
    total = 0
    last = len(text) - 1
    for position, char in enumerate(text):
        if char == "-":
            continue
        value = 10 if char == "X" else ord(char) - ord("0")
        if weight == 1:
            if position != last or not char.isascii():
                return False
            return (total + value) % 11 == 0
        if not 0 <= value <= 9:
            return False
        total += value * weight
        weight -= 1
    return False


def luhn_valid(text: str) -> bool:
    """Tell whether ``text`` passes the Luhn check; spaces are ignored."""
    digits = text.replace(" ", "")
    if len(digits) < 2 or not all(char in _DIGITS for char in digits):
        return False
    total = 0
    for position, char in enumerate(reversed(digits)):
        value = int(char)
        if position % 2:
            value *= 2
            if value > 9:
                value -= 9
        total += value
    return total % 10 == 0