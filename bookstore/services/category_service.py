# bookstore/services/category_service.py
from typing import List

from sqlalchemy.orm import Session

from bookstore.data.models import CategoryModel
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.mappers import category_to_dto, category_to_entity
from bookstore.domain.schemas import CategoryOut, CategoryRequest
from bookstore.repos.category_repo import CategoryRepo
from bookstore.repos.pagination import PageRequest
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.repo = CategoryRepo(db)

    def _get_or_raise(self, category_id: int, message: str) -> CategoryModel:
        category = self.repo.get(category_id)
        if not category:
            raise EntityNotFoundError(message)
        return category

    def create(self, request: CategoryRequest) -> CategoryOut:
        category = self.repo.add(category_to_entity(request))
        self.repo.commit()
        logger.info(f"Category {category.id} created")
        return category_to_dto(category)

    def list(self, page: PageRequest) -> List[CategoryOut]:
        return [category_to_dto(c) for c in self.repo.find_all(page)]

    def get_by_id(self, category_id: int) -> CategoryOut:
        category = self._get_or_raise(category_id, f"Can't find category by id: {category_id}")
        return category_to_dto(category)

    def update(self, category_id: int, request: CategoryRequest) -> CategoryOut:
        category = self._get_or_raise(category_id, f"Category by id: {category_id} does not exist")
        category.name = request.name
        category.description = request.description
        self.repo.commit()
        logger.info(f"Category {category_id} updated")
        return category_to_dto(category)

    def soft_delete(self, category_id: int) -> None:
        category = self._get_or_raise(
            category_id, f"Category by id: {category_id} does not exist and can't be deleted"
        )
        self.repo.soft_delete(category)
        self.repo.commit()
        logger.info(f"Category {category_id} marked as deleted")
