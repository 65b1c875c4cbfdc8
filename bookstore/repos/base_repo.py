# bookstore/repos/base_repo.py
from typing import Generic, Type, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from bookstore.data.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class SoftDeleteRepo(Generic[ModelT]):
    """
    Wspolna baza repozytoriow. Kazdy odczyt idzie przez _select(),
    ktory zawsze dokleja warunek is_deleted = false.
    """

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def _select(self, *entities) -> Select:
        stmt = select(*entities) if entities else select(self.model)
        return stmt.where(self.model.is_deleted.is_(False))

    def get(self, entity_id: int) -> ModelT | None:
        return self.db.execute(
            self._select().where(self.model.id == entity_id)
        ).scalar_one_or_none()

    def exists(self, entity_id: int) -> bool:
        return self.get(entity_id) is not None

    def add(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.flush()
        return entity

    def soft_delete(self, entity: ModelT) -> None:
        entity.is_deleted = True
        self.db.flush()

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
