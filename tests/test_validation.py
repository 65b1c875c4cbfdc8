import pytest
from pydantic import ValidationError as PydanticValidationError

from bookstore.domain.schemas import CreateBookRequest, UserRegistrationRequest
from bookstore.domain.validation import fields_match, is_image_reference, is_valid_isbn
from tests.factories import ISBN_10, ISBN_A, ISBN_C


@pytest.mark.parametrize("isbn", [ISBN_A, ISBN_C, ISBN_10, "0-306-40615-2", "080442957X"])
def test_valid_isbn(isbn):
    assert is_valid_isbn(isbn)


@pytest.mark.parametrize("isbn", ["9783161484101", "12345", "", None, "97831614841OO"])
def test_invalid_isbn(isbn):
    assert not is_valid_isbn(isbn)


def test_image_reference():
    assert is_image_reference("https://cdn.example.com/covers/1.png")
    assert is_image_reference("cover.jpeg")
    assert not is_image_reference("cover.txt")
    assert not is_image_reference(None)


def test_fields_match_rule():
    assert fields_match("secret123", "secret123")
    assert not fields_match("secret123", "other1234")
    # oba pola nieobecne traktowane jako zgodne
    assert fields_match(None, None)
    assert not fields_match("", None)


def _registration(**overrides):
    data = {
        "email": "reader@example.com",
        "password": "password123",
        "repeat_password": "password123",
        "first_name": "Jane",
        "last_name": "Reader",
    }
    data.update(overrides)
    return data


def test_registration_passwords_must_match():
    with pytest.raises(PydanticValidationError):
        UserRegistrationRequest(**_registration(repeat_password="different1"))


def test_registration_missing_repeat_password_is_rejected():
    with pytest.raises(PydanticValidationError):
        UserRegistrationRequest(**_registration(repeat_password=None))


def test_registration_blank_name_is_rejected():
    with pytest.raises(PydanticValidationError):
        UserRegistrationRequest(**_registration(first_name="   "))


def test_book_request_validates_isbn_price_and_cover():
    valid = {
        "title": "Dune",
        "author": "Frank Herbert",
        "isbn": ISBN_A,
        "price": "12.50",
        "cover_image": "dune.png",
        "category_ids": [],
    }
    assert CreateBookRequest(**valid).isbn == ISBN_A

    for field, bad in [("isbn", "9783161484101"), ("price", "-1"), ("cover_image", "dune.pdf"), ("title", "")]:
        with pytest.raises(PydanticValidationError):
            CreateBookRequest(**{**valid, field: bad})


def test_book_request_normalizes_isbn():
    request = CreateBookRequest(
        title="Dune",
        author="Frank Herbert",
        isbn="978 - 1 - 86197 - 271 - 2",
        price="10.00",
        cover_image="dune.png",
        category_ids=[],
    )
    assert request.isbn == "9781861972712"
