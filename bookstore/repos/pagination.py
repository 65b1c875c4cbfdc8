# bookstore/repos/pagination.py
from dataclasses import dataclass, field
from typing import List, Tuple

from sqlalchemy import Select

from bookstore.domain.exceptions import ValidationError
from bookstore.utils.settings import DEFAULT_PAGE_SIZE

_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, page: int, size: int, sort: List[str] | None = None) -> "PageRequest":
        """
        sort w stylu "price,desc" albo samo "title" (domyslnie asc).
        """
        orders = []
        for token in sort or []:
            name, _, direction = token.partition(",")
            name = name.strip()
            direction = (direction.strip() or "asc").lower()
            if not name:
                continue
            if direction not in _DIRECTIONS:
                raise ValidationError(f"Invalid sort direction: {direction}", field="sort")
            orders.append((name, direction))
        return cls(page=page, size=size, sort=tuple(orders))

    @property
    def offset(self) -> int:
        return self.page * self.size


def apply_page(stmt: Select, model, page: PageRequest) -> Select:
    columns = model.__table__.columns
    for name, direction in page.sort:
        if name not in columns or name == "is_deleted":
            raise ValidationError(f"Can't sort by unknown field: {name}", field="sort")
        column = columns[name]
        stmt = stmt.order_by(column.desc() if direction == "desc" else column.asc())

    #naturalna kolejnosc po id jako ostatni klucz
    return stmt.order_by(model.id).offset(page.offset).limit(page.size)
