# bookstore/api/pagination.py
from typing import List

from fastapi import Query

from bookstore.repos.pagination import PageRequest
from bookstore.utils.settings import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


def page_params(
    page: int = Query(0, ge=0, description="Numer strony (od 0)"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Rozmiar strony"),
    sort: List[str] | None = Query(None, description="np. price,desc"),
) -> PageRequest:
    return PageRequest.parse(page, size, sort)
