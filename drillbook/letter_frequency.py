"""Character frequency counting, sequentially or across a thread pool."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor


def frequency(text: str) -> Counter[str]:
    """Count how often each character occurs in ``text``."""
    return Counter(text)


def concurrent_frequency(texts: Iterable[str]) -> Counter[str]:
    """Count the characters of every text in ``texts``, one worker per text."""
    items = list(texts)
    total: Counter[str] = Counter()
    if not items:
        return total
    with ThreadPoolExecutor() as pool:
        for counts in pool.map(frequency, items):
            total.update(counts)
    return total