# bookstore/repos/category_repo.py
from typing import List

from bookstore.data.models import CategoryModel
from bookstore.repos.base_repo import SoftDeleteRepo
from bookstore.repos.pagination import PageRequest, apply_page


class CategoryRepo(SoftDeleteRepo[CategoryModel]):
    model = CategoryModel

    def find_all(self, page: PageRequest) -> List[CategoryModel]:
        return list(self.db.execute(apply_page(self._select(), CategoryModel, page)).scalars().all())
