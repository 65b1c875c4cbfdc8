# bookstore/api/routers/books.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from bookstore.api.pagination import page_params
from bookstore.api.security import admin_only, any_user
from bookstore.data.database import get_db
from bookstore.domain.schemas import BookOut, BookSearchParams, CreateBookRequest
from bookstore.repos.pagination import PageRequest
from bookstore.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["books"])


def get_service(db: Session):
    return BookService(db)


@router.post("", response_model=BookOut, status_code=201, dependencies=[Depends(admin_only)])
def create_book(payload: CreateBookRequest, db: Session = Depends(get_db)):
    return get_service(db).create(payload)


@router.get("", response_model=List[BookOut], dependencies=[Depends(any_user)])
def list_books(page: PageRequest = Depends(page_params), db: Session = Depends(get_db)):
    return get_service(db).list(page)


# musi byc przed /{book_id}
@router.get("/search", response_model=List[BookOut], dependencies=[Depends(any_user)])
def search_books(
    title: List[str] | None = Query(None),
    author: List[str] | None = Query(None),
    isbn: List[str] | None = Query(None),
    price: List[str] | None = Query(None),
    page: PageRequest = Depends(page_params),
    db: Session = Depends(get_db),
):
    params = BookSearchParams(title=title, author=author, isbn=isbn, price=price)
    return get_service(db).search(params, page)


@router.get("/{book_id}", response_model=BookOut, dependencies=[Depends(any_user)])
def get_book(book_id: int, db: Session = Depends(get_db)):
    return get_service(db).get_by_id(book_id)


@router.put("/{book_id}", response_model=BookOut, dependencies=[Depends(admin_only)])
def update_book(book_id: int, payload: CreateBookRequest, db: Session = Depends(get_db)):
    return get_service(db).update(book_id, payload)


@router.delete("/{book_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_book(book_id: int, db: Session = Depends(get_db)):
    get_service(db).soft_delete(book_id)
