# bookstore/repos/order_repo.py
from typing import List

from sqlalchemy.orm import Session

from bookstore.data.models import OrderItemModel, OrderModel
from bookstore.repos.base_repo import SoftDeleteRepo


class OrderRepo(SoftDeleteRepo[OrderModel]):
    model = OrderModel

    def __init__(self, db: Session):
        super().__init__(db)

    def find_by_user(self, user_id: int) -> List[OrderModel]:
        stmt = self._select().where(OrderModel.user_id == user_id).order_by(OrderModel.id)
        return list(self.db.execute(stmt).scalars().all())

    def get_for_user(self, order_id: int, user_id: int) -> OrderModel | None:
        return self.db.execute(
            self._select().where(OrderModel.id == order_id, OrderModel.user_id == user_id)
        ).scalar_one_or_none()

    def add_order_item(self, order: OrderModel, item: OrderItemModel) -> OrderItemModel:
        order.order_items.append(item)
        self.db.flush()
        return item
