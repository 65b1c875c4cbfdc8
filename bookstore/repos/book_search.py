# bookstore/repos/book_search.py
"""
Budowanie predykatu wyszukiwania ksiazek z opcjonalnych parametrow.

Kazda grupa parametrow (title, author, price) ma swojego providera.
Wewnatrz grupy wartosci sa laczone OR, grupy miedzy soba AND.
Brak grupy = brak ograniczenia.
"""
import re
from decimal import Decimal
from typing import Dict, Iterable, List

from sqlalchemy import ColumnElement, and_, or_, true

from bookstore.data.models import BookModel
from bookstore.domain.exceptions import ValidationError
from bookstore.domain.schemas import BookSearchParams

_INT_TOKEN = re.compile(r"[+-]?\d+")


def split_tokens(values: Iterable[str] | None) -> List[str]:
    """?title=a,b i ?title=a&title=b znacza to samo, puste tokeny odpadaja."""
    tokens = []
    for value in values or []:
        tokens.extend(t.strip() for t in value.split(","))
    return [t for t in tokens if t]


class TitlePredicateProvider:
    key = "title"

    def predicate(self, params: List[str]) -> ColumnElement[bool]:
        return or_(*(BookModel.title.contains(p, autoescape=True) for p in params))


class AuthorPredicateProvider:
    key = "author"

    def predicate(self, params: List[str]) -> ColumnElement[bool]:
        return or_(*(BookModel.author.contains(p, autoescape=True) for p in params))


class PricePredicateProvider:
    key = "price"

    @staticmethod
    def parse_price(token: str) -> int:
        if not _INT_TOKEN.fullmatch(token):
            raise ValidationError(f"Invalid price value: '{token}'", field="price")
        return int(token)

    def price_range(self, params: List[str]) -> tuple[int, int]:
        """
        Jedna wartosc P -> [0, P]. Dwie i wiecej -> [min, max] ze wszystkich,
        wartosci pomiedzy min i max nie maja znaczenia.
        """
        prices = [self.parse_price(p) for p in params]
        if len(prices) == 1:
            return 0, prices[0]
        return min(prices), max(prices)

    def predicate(self, params: List[str]) -> ColumnElement[bool]:
        low, high = self.price_range(params)
        return and_(BookModel.price >= Decimal(low), BookModel.price <= Decimal(high))


class BookPredicateProviders:
    def __init__(self, providers=None):
        providers = providers or [
            TitlePredicateProvider(),
            AuthorPredicateProvider(),
            PricePredicateProvider(),
        ]
        self._providers: Dict[str, object] = {p.key: p for p in providers}

    def get(self, key: str):
        provider = self._providers.get(key)
        if provider is None:
            raise ValidationError(f"Search by '{key}' is not supported", field=key)
        return provider


class BookSearchPredicateBuilder:
    # kolejnosc grup w zapytaniu
    GROUPS = ("title", "author", "isbn", "price")

    def __init__(self, providers: BookPredicateProviders | None = None):
        self.providers = providers or BookPredicateProviders()

    def build(self, params: BookSearchParams) -> ColumnElement[bool]:
        predicates = []
        for key in self.GROUPS:
            tokens = split_tokens(getattr(params, key))
            if not tokens:
                continue
            predicates.append(self.providers.get(key).predicate(tokens))

        if not predicates:
            return true()
        return and_(*predicates)
