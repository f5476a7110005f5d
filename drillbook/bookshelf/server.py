"""The bookshelf HTTP application and its entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from flask import Flask

from drillbook.bookshelf.config import new_configuration
from drillbook.bookshelf.database import DatabaseError, DataSources, new_database
from drillbook.bookshelf.handlers import add_book, get_books
from drillbook.bookshelf.services import BooksService


def create_app(data_sources: DataSources) -> Flask:
    """Create the application with its routes under ``/api``."""
    app = Flask(__name__)
    service = BooksService(data_sources.db)

    @app.get("/api/status")
    def status():
        return "ok"

    app.add_url_rule("/api/v1/books", "get_books", view_func=get_books(service), methods=["GET"])
    app.add_url_rule("/api/v1/books", "add_book", view_func=add_book(service), methods=["POST"])
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Start the bookshelf server on the configured port."""
    parser = argparse.ArgumentParser(
        prog="bookshelf",
        description="Serve the bookshelf API; PORT and DATABASE_URL configure it.",
    )
    parser.parse_args(argv)

    config = new_configuration()
    try:
        db = new_database(config.database_url)
    except DatabaseError as exc:
        raise SystemExit(f"failed to create database: {exc}") from exc
    try:
        try:
            port = int(config.port)
        except ValueError:
            raise SystemExit(f"invalid port: {config.port!r}") from None
        create_app(DataSources(db=db)).run(host="0.0.0.0", port=port)
    finally:
        db.close_connections()
    return 0