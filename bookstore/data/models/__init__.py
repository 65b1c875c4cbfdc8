#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from bookstore.data.models.category import CategoryModel
from bookstore.data.models.book import BookModel, books_categories
from bookstore.data.models.user import RoleModel, RoleName, UserModel, users_roles
from bookstore.data.models.cart import ShoppingCartModel
from bookstore.data.models.cart_item import CartItemModel
from bookstore.data.models.order import OrderModel, OrderStatus
from bookstore.data.models.order_item import OrderItemModel

__all__ = [
    "CategoryModel",
    "BookModel",
    "books_categories",
    "RoleModel",
    "RoleName",
    "UserModel",
    "users_roles",
    "ShoppingCartModel",
    "CartItemModel",
    "OrderModel",
    "OrderStatus",
    "OrderItemModel",
]
