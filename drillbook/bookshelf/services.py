"""The books service, between the HTTP handlers and the storage."""

from __future__ import annotations

from drillbook.bookshelf.database import Database, DatabaseError, NewBook
from drillbook.bookshelf.domain import BookEntry


class ServiceError(Exception):
    """Raised when the service cannot complete a request."""


class BooksService:
    """Reads and stores books through a Database."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def get_books(self) -> list[BookEntry]:
        """Return every stored book. Raises ServiceError when loading fails."""
        try:
            records = self._db.load_all_books()
        except DatabaseError as exc:
            raise ServiceError(f"failed to load books: {exc}") from exc
        return [BookEntry(title=record.title) for record in records]

    def save_book(self, book: BookEntry) -> None:
        """Store ``book``. Raises ServiceError when saving fails."""
        try:
            self._db.create_book(NewBook(title=book.title))
        except DatabaseError as exc:
            raise ServiceError(f"failed to save book: {exc}") from exc