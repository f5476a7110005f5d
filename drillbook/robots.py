"""Robots that are given random, unique factory names."""

from __future__ import annotations

import random
import threading
from collections.abc import Iterator, MutableSet
from itertools import product
from string import ascii_uppercase

_NAMESPACE_SIZE = 26 * 26 * 1000

_ASSIGNED: set[str] = set()
_LOCK = threading.Lock()


class NamespaceExhaustedError(RuntimeError):
    """Raised when every possible robot name is already in use."""

    def __init__(self, message: str = "Namespace is exhausted") -> None:
        super().__init__(message)


def _all_names() -> Iterator[str]:
    for first, second, number in product(ascii_uppercase, ascii_uppercase, range(1000)):
        yield f"{first}{second}{number:03d}"


def _random_name(rng: random.Random) -> str:
    letters = "".join(rng.choice(ascii_uppercase) for _ in range(2))
    return f"{letters}{rng.randrange(1000):03d}"


def _fresh_name(rng: random.Random, taken: MutableSet[str]) -> str:
    if len(taken) >= _NAMESPACE_SIZE:
        raise NamespaceExhaustedError()
    if len(taken) < _NAMESPACE_SIZE // 2:
        name = _random_name(rng)
        while name in taken:
            name = _random_name(rng)
    else:
        # With most names gone, draw from the free ones directly.
        name = rng.choice([candidate for candidate in _all_names() if candidate not in taken])
    taken.add(name)
    return name


class Robot:
    """A robot whose name, two letters and three digits, is chosen on first use.

    Names are unique among all robots sharing the same ``taken`` set; by default
    that is every robot in the process. A name once given is never reused.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        taken: MutableSet[str] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._taken = _ASSIGNED if taken is None else taken
        self._name: str | None = None

    def name(self) -> str:
        """Return the robot's name, choosing one if it has none.

        Raises NamespaceExhaustedError when no unused name is left.
        """
        if self._name is None:
            with _LOCK:
                self._name = _fresh_name(self._rng, self._taken)
        return self._name

    def reset(self) -> None:
        """Wipe the robot's name; the next call to ``name`` picks a new one."""
        self._name = None