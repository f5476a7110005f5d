"""Shapes of the data the bookshelf API sends and receives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BookEntry:
    """A book as the API presents it."""

    title: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the book."""
        return {"title": self.title}


@dataclass(frozen=True)
class BooksResponse:
    """A list of books as the API returns it."""

    books: list[BookEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the response."""
        return {"books": [book.to_dict() for book in self.books]}


@dataclass(frozen=True)
class ErrorResponse:
    """An error message as the API returns it."""

    error: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the error."""
        return {"error": self.error}