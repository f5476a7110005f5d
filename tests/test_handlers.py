from flask import Flask

from drillbook.bookshelf.domain import BookEntry
from drillbook.bookshelf.handlers import add_book, get_books
from drillbook.bookshelf.services import ServiceError

BOOKS_ROUTE = "/api/v1/books"


class FakeService:
    def __init__(self, books=(), error=None):
        self.books = list(books)
        self.error = error
        self.saved = []

    def get_books(self):
        if self.error:
            raise self.error
        return list(self.books)

    def save_book(self, book):
        self.saved.append(book)
        if self.error:
            raise self.error


def client_for(view, methods):
    app = Flask(__name__)
    app.add_url_rule(BOOKS_ROUTE, "books", view_func=view, methods=methods)
    return app.test_client()


def test_get_books():
    service = FakeService(books=[BookEntry(title="Title")])
    client = client_for(get_books(service), ["GET"])

    resp = client.get(BOOKS_ROUTE)

    assert resp.status_code == 200
    assert resp.get_json() == {"books": [{"title": "Title"}]}


def test_get_books_service_fails():
    client = client_for(get_books(FakeService(error=ServiceError("boom"))), ["GET"])

    resp = client.get(BOOKS_ROUTE)

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "internal error"


def test_add_book():
    service = FakeService()
    client = client_for(add_book(service), ["POST"])

    resp = client.post(BOOKS_ROUTE, json={"title": "Title"})

    assert resp.status_code == 201
    assert service.saved == [BookEntry(title="Title")]


def test_add_book_from_form():
    service = FakeService()
    client = client_for(add_book(service), ["POST"])

    resp = client.post(BOOKS_ROUTE, data={"title": "Title"})

    assert resp.status_code == 201
    assert service.saved == [BookEntry(title="Title")]


def test_add_book_invalid_request():
    service = FakeService()
    client = client_for(add_book(service), ["POST"])

    resp = client.post(BOOKS_ROUTE)

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid request"
    assert service.saved == []


def test_add_book_wrong_title_type():
    client = client_for(add_book(FakeService()), ["POST"])

    resp = client.post(BOOKS_ROUTE, json={"title": 5})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid request"


def test_add_book_service_fails():
    client = client_for(add_book(FakeService(error=ServiceError("boom"))), ["POST"])

    resp = client.post(BOOKS_ROUTE, json={"title": "Title"})

    assert resp.status_code == 500
    assert resp.get_json()["error"] == "internal error"