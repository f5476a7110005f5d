"""An immutable list of integers with the classic list operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import reduce
from typing import overload


class IntList(Sequence[int]):
    """An immutable sequence of integers; every operation returns a new list."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> IntList: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return IntList(self._items[index])
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IntList):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"IntList({list(self._items)!r})"

    def append(self, other: Iterable[int]) -> IntList:
        """Return this list followed by ``other``."""
        return IntList((*self._items, *other))

    def concat(self, lists: Iterable[Iterable[int]]) -> IntList:
        """Return this list followed by every list in ``lists``."""
        return reduce(IntList.append, lists, self)

    def filter(self, predicate: Callable[[int], bool]) -> IntList:
        """Return the items for which ``predicate`` holds."""
        return IntList(item for item in self._items if predicate(item))

    def foldl(self, function: Callable[[int, int], int], initial: int) -> int:
        """Fold from the left, calling ``function(accumulator, item)``."""
        return reduce(function, self._items, initial)

    def foldr(self, function: Callable[[int, int], int], initial: int) -> int:
        """Fold from the right, calling ``function(item, accumulator)``."""
        return reduce(lambda acc, item: function(item, acc), reversed(self._items), initial)

    def map(self, function: Callable[[int], int]) -> IntList:
        """Return the result of ``function`` applied to every item."""
        return IntList(function(item) for item in self._items)

    def reverse(self) -> IntList:
        """Return the items in reverse order."""
        return IntList(reversed(self._items))