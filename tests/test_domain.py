import json

from drillbook.bookshelf.domain import BookEntry, BooksResponse, ErrorResponse


def test_book_entry_to_dict():
    assert BookEntry(title="Title").to_dict() == {"title": "Title"}


def test_books_response_to_dict():
    response = BooksResponse(books=[BookEntry(title="A"), BookEntry(title="B")])

    assert response.to_dict() == {"books": [{"title": "A"}, {"title": "B"}]}


def test_empty_books_response_keeps_books_key():
    assert BooksResponse().to_dict() == {"books": []}


def test_error_response_to_dict():
    assert ErrorResponse(error="internal error").to_dict() == {"error": "internal error"}


def test_books_response_json_round_trip():
    response = BooksResponse(books=[BookEntry(title="Title")])

    decoded = json.loads(json.dumps(response.to_dict()))

    assert BooksResponse(books=[BookEntry(**book) for book in decoded["books"]]) == response