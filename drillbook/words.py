"""Word games: anagrams, isograms, pangrams, counting and Scrabble scoring."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Mapping

_WORD_SEPARATOR = re.compile(r"(?:'*[^0-9A-Za-z']+'*)+")

_SCRABBLE_SCORES = {
    **dict.fromkeys("AEIOULNRST", 1),
    **dict.fromkeys("DG", 2),
    **dict.fromkeys("BCMP", 3),
    **dict.fromkeys("FHVWY", 4),
    "K": 5,
    **dict.fromkeys("JX", 8),
    **dict.fromkeys("QZ", 10),
}


def _letter_counts(text: str) -> Counter[str]:
    return Counter(char.lower() for char in text)


def detect_anagrams(subject: str, candidates: Iterable[str]) -> list[str]:
    """Return the candidates that are anagrams of ``subject``, ignoring case.

    A candidate equal to the subject itself does not count.
    """
    wanted = _letter_counts(subject)
    folded = subject.casefold()
    return [
        candidate
        for candidate in candidates
        if candidate.casefold() != folded and _letter_counts(candidate) == wanted
    ]


def is_isogram(word: str) -> bool:
    """Tell whether no letter of ``word`` repeats; hyphens and spaces are ignored."""
    seen: set[str] = set()
    for char in word:
        if char in "- ":
            continue
        key = char.upper()
        if key in seen:
            return False
        seen.add(key)
    return True


def is_pangram(text: str) -> bool:
    """Tell whether ``text`` holds exactly 26 distinct letters."""
    return len({char.upper() for char in text if char.isalpha()}) == 26


def word_count(text: str) -> dict[str, int]:
    """Count how often each word occurs in ``text``, case-insensitively."""
    words = _WORD_SEPARATOR.split(text.lower() + " ")
    return dict(Counter(word for word in words if word))


def scrabble_score(word: str) -> int:
    """Return the Scrabble score of ``word``; unknown characters score nothing."""
    return sum(_SCRABBLE_SCORES.get(char.upper(), 0) for char in word)


def transform(legacy: Mapping[int, Iterable[str]]) -> dict[str, int]:
    """Turn a score-to-letters mapping into a lower-case letter-to-score mapping."""
    return {
        letter.lower(): score
        for score, letters in legacy.items()
        for letter in letters
    }