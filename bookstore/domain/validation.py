# bookstore/domain/validation.py
import re

_IMAGE_PATTERN = re.compile(r".*?(gif|jpeg|png|jpg|img|bmp)")
_ISBN_SEPARATORS = re.compile(r"[\s-]")


def fields_match(value, repeated) -> bool:
    """
    Regula porownania hasla i powtorzonego hasla.

    Pola sa zgodne, gdy maja te sama wartosc ALBO gdy oba sa calkowicie
    nieobecne (None). Pusty string to nadal wartosc, wiec "" i None sie nie zgadzaja.
    """
    if value is None and repeated is None:
        return True
    return value == repeated


def is_image_reference(value: str | None) -> bool:
    return value is not None and _IMAGE_PATTERN.fullmatch(value) is not None


def _isbn10_valid(digits: str) -> bool:
    if not re.fullmatch(r"\d{9}[\dX]", digits):
        return False
    total = 0
    for i, ch in enumerate(digits):
        value = 10 if ch == "X" else int(ch)
        total += (10 - i) * value
    return total % 11 == 0


def _isbn13_valid(digits: str) -> bool:
    if not re.fullmatch(r"\d{13}", digits):
        return False
    total = sum(int(ch) * (1 if i % 2 == 0 else 3) for i, ch in enumerate(digits))
    return total % 10 == 0


def normalize_isbn(value: str) -> str:
    return _ISBN_SEPARATORS.sub("", value).upper()


def is_valid_isbn(value: str | None) -> bool:
    """ISBN-10 lub ISBN-13 z poprawna cyfra kontrolna, myslniki i spacje ignorowane."""
    if value is None:
        return False
    digits = normalize_isbn(value)
    if len(digits) == 10:
        return _isbn10_valid(digits)
    if len(digits) == 13:
        return _isbn13_valid(digits)
    return False
