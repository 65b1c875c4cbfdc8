# bookstore/services/book_service.py
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookstore.data.models import BookModel
from bookstore.domain.exceptions import ConflictError, EntityNotFoundError
from bookstore.domain.mappers import book_to_dto, book_to_dto_without_categories, book_to_entity
from bookstore.domain.schemas import BookOut, BookSearchParams, BookWithoutCategoryIdsOut, CreateBookRequest
from bookstore.repos.book_repo import BookRepo
from bookstore.repos.book_search import BookSearchPredicateBuilder
from bookstore.repos.pagination import PageRequest
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


class BookService:
    """
    Katalog ksiazek: CRUD z soft delete, wyszukiwanie i lista po kategorii.
    """

    def __init__(self, db: Session, search_builder: BookSearchPredicateBuilder | None = None):
        self.repo = BookRepo(db)
        self.search_builder = search_builder or BookSearchPredicateBuilder()

    def _get_or_raise(self, book_id: int, message: str) -> BookModel:
        book = self.repo.get(book_id)
        if not book:
            raise EntityNotFoundError(message)
        return book

    def _check_isbn(self, isbn: str, exclude_id: int | None = None):
        if self.repo.isbn_taken(isbn, exclude_id=exclude_id):
            raise ConflictError(f"Book with isbn: {isbn} already exists")

    def _commit(self, isbn: str):
        try:
            self.repo.commit()
        except IntegrityError:
            #ktos inny zapisal ten sam isbn miedzy sprawdzeniem a commitem
            self.repo.rollback()
            raise ConflictError(f"Book with isbn: {isbn} already exists")

    #query
    def list(self, page: PageRequest) -> List[BookOut]:
        return [book_to_dto(b) for b in self.repo.find_all(page)]

    def get_by_id(self, book_id: int) -> BookOut:
        book = self._get_or_raise(book_id, f"Book by id: {book_id} does not exist")
        return book_to_dto(book)

    def search(self, params: BookSearchParams, page: PageRequest) -> List[BookOut]:
        predicate = self.search_builder.build(params)
        return [book_to_dto(b) for b in self.repo.find_all(page, where=predicate)]

    def list_by_category(self, category_id: int, page: PageRequest) -> List[BookWithoutCategoryIdsOut]:
        return [book_to_dto_without_categories(b) for b in self.repo.find_by_category(category_id, page)]

    #commands
    def create(self, request: CreateBookRequest) -> BookOut:
        self._check_isbn(request.isbn)

        categories = self.repo.category_refs(request.category_ids)
        book = self.repo.add(book_to_entity(request, categories))
        self._commit(request.isbn)

        logger.info(f"Book {book.id} created (isbn {book.isbn})")
        return book_to_dto(book)

    def update(self, book_id: int, request: CreateBookRequest) -> BookOut:
        book = self._get_or_raise(
            book_id, f"Can't update book by id: {book_id} as it does not exist"
        )
        self._check_isbn(request.isbn, exclude_id=book_id)

        #pelna podmiana pol, id zostaje
        book.title = request.title
        book.author = request.author
        book.isbn = request.isbn
        book.price = request.price
        book.description = request.description
        book.cover_image = request.cover_image
        book.categories = self.repo.category_refs(request.category_ids)
        self._commit(request.isbn)

        logger.info(f"Book {book_id} updated")
        return book_to_dto(book)

    def soft_delete(self, book_id: int) -> None:
        book = self._get_or_raise(
            book_id, f"Book by id: {book_id} does not exist and can't be deleted"
        )
        self.repo.soft_delete(book)
        self.repo.commit()
        logger.info(f"Book {book_id} marked as deleted")
