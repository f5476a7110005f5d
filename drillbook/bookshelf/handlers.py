"""HTTP handlers for the books endpoints."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from flask import jsonify, request

from drillbook.bookshelf.domain import BookEntry, BooksResponse, ErrorResponse
from drillbook.bookshelf.services import BooksService, ServiceError

logger = logging.getLogger(__name__)

_FORM_TYPES = frozenset({"application/x-www-form-urlencoded", "multipart/form-data"})


def _send_error(code: int, message: str):
    return jsonify(ErrorResponse(error=message).to_dict()), code


def _parse_book() -> BookEntry:
    """Read a book from the request body, as JSON or as a form."""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValueError("request body is not a JSON object")
        title = data.get("title", "")
    elif request.mimetype in _FORM_TYPES:
        title = request.form.get("title", "")
    else:
        raise ValueError(f"unsupported content type: {request.mimetype!r}")
    if not isinstance(title, str):
        raise ValueError("title must be a string")
    return BookEntry(title=title)


def get_books(service: BooksService) -> Callable[[], Any]:
    """Return a view that lists every book."""

    def view():
        try:
            books = service.get_books()
        except ServiceError as exc:
            logger.error("GetBooks failed: %s", exc)
            return _send_error(500, "internal error")
        return jsonify(BooksResponse(books=books).to_dict())

    return view


def add_book(service: BooksService) -> Callable[[], Any]:
    """Return a view that stores the book in the request body."""

    def view():
        try:
            book = _parse_book()
        except ValueError as exc:
            logger.warning("AddBook request parsing failed: %s", exc)
            return _send_error(400, "invalid request")
        try:
            service.save_book(book)
        except ServiceError as exc:
            logger.error("AddBook failed: %s", exc)
            return _send_error(500, "internal error")
        return "", 201

    return view