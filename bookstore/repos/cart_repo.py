# bookstore/repos/cart_repo.py
from sqlalchemy.orm import Session

from bookstore.data.models import CartItemModel, ShoppingCartModel
from bookstore.repos.base_repo import SoftDeleteRepo


class CartRepo(SoftDeleteRepo[ShoppingCartModel]):
    model = ShoppingCartModel

    def __init__(self, db: Session):
        super().__init__(db)

    def get_by_user(self, user_id: int) -> ShoppingCartModel | None:
        # id koszyka == id uzytkownika
        return self.get(user_id)

    def create_cart(self, user_id: int) -> ShoppingCartModel:
        cart = ShoppingCartModel(id=user_id)
        self.db.add(cart)
        self.db.flush()
        return cart

    def add_cart_item(self, cart: ShoppingCartModel, item: CartItemModel) -> CartItemModel:
        cart.cart_items.append(item)
        self.db.flush()
        return item

    def delete_cart_item(self, cart: ShoppingCartModel, item: CartItemModel) -> None:
        # twarde usuniecie, nie soft delete
        cart.cart_items.remove(item)
        self.db.delete(item)
        self.db.flush()
