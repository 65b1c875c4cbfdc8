# bookstore/repos/book_repo.py
from typing import Iterable, List

from sqlalchemy import ColumnElement, select, true
from sqlalchemy.orm import Session

from bookstore.data.models import BookModel, CategoryModel, books_categories
from bookstore.repos.base_repo import SoftDeleteRepo
from bookstore.repos.pagination import PageRequest, apply_page


class BookRepo(SoftDeleteRepo[BookModel]):
    model = BookModel

    def __init__(self, db: Session):
        super().__init__(db)

    def find_all(self, page: PageRequest, where: ColumnElement[bool] | None = None) -> List[BookModel]:
        stmt = self._select().where(where if where is not None else true())
        return list(self.db.execute(apply_page(stmt, BookModel, page)).scalars().all())

    def find_by_category(self, category_id: int, page: PageRequest) -> List[BookModel]:
        stmt = (
            self._select()
            .join(books_categories, books_categories.c.book_id == BookModel.id)
            .join(CategoryModel, CategoryModel.id == books_categories.c.category_id)
            # usunieta kategoria nie ma zadnych ksiazek
            .where(CategoryModel.id == category_id, CategoryModel.is_deleted.is_(False))
        )
        return list(self.db.execute(apply_page(stmt, BookModel, page)).scalars().all())

    def isbn_taken(self, isbn: str, exclude_id: int | None = None) -> bool:
        # unikalnosc isbn obejmuje tez ksiazki usuniete (soft)
        stmt = select(BookModel.id).where(BookModel.isbn == isbn)
        if exclude_id is not None:
            stmt = stmt.where(BookModel.id != exclude_id)
        return self.db.execute(stmt).first() is not None

    def category_refs(self, category_ids: Iterable[int]) -> List[CategoryModel]:
        """Referencje do zywych kategorii, nieznane id sa pomijane."""
        ids = set(category_ids)
        if not ids:
            return []
        stmt = (
            select(CategoryModel)
            .where(CategoryModel.id.in_(ids), CategoryModel.is_deleted.is_(False))
            .order_by(CategoryModel.id)
        )
        return list(self.db.execute(stmt).scalars().all())
