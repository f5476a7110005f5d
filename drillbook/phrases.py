"""Small text exercises: acronyms, conversational replies, proverbs and sounds."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence

# Whitespace as understood by the separator class: tab, newline, form feed,
# carriage return and space, plus the hyphen.
_WORD_SEPARATOR = re.compile(r"[\t\n\f\r -]+")


def first_letter(word: str) -> str:
    """Return the first letter found in ``word``.

    Raises ValueError when the word holds no letters at all.
    """
    for char in word:
        if char.isalpha():
            return char
    raise ValueError("The input has no letters")


def abbreviate(phrase: str) -> str:
    """Build an upper-case acronym from the words of ``phrase``."""
    letters = []
    for word in _WORD_SEPARATOR.split(phrase):
        try:
            letters.append(first_letter(word).upper())
        except ValueError:
            continue
    return "".join(letters)


def _category(char: str) -> str:
    return unicodedata.category(char)


def hey(remark: str) -> str:
    """Answer a remark the way a lackadaisical teenager would."""
    upper = any(_category(c) == "Lu" for c in remark)
    lower = any(_category(c) == "Ll" for c in remark)
    alphanumeric = upper or lower or any(_category(c).startswith("N") for c in remark)

    if remark.strip().endswith("?"):
        if upper and not lower:
            return "Calm down, I know what I'm doing!"
        return "Sure."
    if not lower:
        if upper:
            return "Whoa, chill out!"
        if not alphanumeric:
            return "Fine. Be that way!"
    return "Whatever."


def share_with(name: str = "") -> str:
    """Return the two-fer phrase, sharing with ``name`` or with "you"."""
    return f"One for {name or 'you'}, one for me."


def proverb(rhyme: Sequence[str]) -> list[str]:
    """Build the "for want of a nail" proverb from a list of items."""
    if not rhyme:
        return []
    lines = [
        f"For want of a {want} the {lost} was lost."
        for want, lost in zip(rhyme, rhyme[1:])
    ]
    lines.append(f"And all for the want of a {rhyme[0]}.")
    return lines


def raindrops(number: int) -> str:
    """Convert a number to its raindrop sounds, or to its digits if it has none."""
    sounds = "".join(
        sound
        for factor, sound in ((3, "Pling"), (5, "Plang"), (7, "Plong"))
        if number % factor == 0
    )
    return sounds or str(number)