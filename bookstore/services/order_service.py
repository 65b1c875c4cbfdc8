# bookstore/services/order_service.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, List

from sqlalchemy.orm import Session

from bookstore.data.models import CartItemModel, OrderItemModel, OrderModel, OrderStatus
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.mappers import order_item_to_dto, order_to_dto
from bookstore.domain.schemas import OrderItemOut, OrderOut
from bookstore.repos.book_repo import BookRepo
from bookstore.repos.cart_repo import CartRepo
from bookstore.repos.order_repo import OrderRepo
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


def truncated_order_total(cart_items: Iterable[CartItemModel]) -> Decimal:
    """
    Suma zamowienia: kazda linia (cena * ilosc) obcinana do pelnych jednostek
    PRZED sumowaniem, wiec grosze z linii przepadaja.
    Pelna precyzja to: sum(i.book.price * i.quantity for i in cart_items).
    """
    return Decimal(sum(int(i.book.price * i.quantity) for i in cart_items))


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Zlozenie zamowienia zamienia koszyk w zamowienie w jednej transakcji.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.book_repo = BookRepo(db)

    def _get_user_order(self, user_id: int, order_id: int) -> OrderModel:
        order = self.repo.get_for_user(order_id, user_id)
        if not order:
            raise EntityNotFoundError(f"Can't find order by id: {order_id}")
        return order

    def place_order(self, user_id: int, shipping_address: str) -> OrderOut:
        """
        1. Pobiera koszyk (musi istniec i nie byc pusty)
        2. Liczy total
        3. Tworzy zamowienie PENDING (flush, zeby mialo id)
        4. Dla kazdej pozycji: ksiazka z bazy, OrderItem z cena z tej chwili,
           usuniecie pozycji z koszyka
        5. Jeden commit - blad w dowolnym kroku wycofuje calosc
        """
        cart = self.cart_repo.get_by_user(user_id)
        if not cart:
            raise EntityNotFoundError("Can't find your shopping cart")

        cart_items = list(cart.cart_items)
        if not cart_items:
            raise EntityNotFoundError(
                "You didn't choose any book to your shopping cart. Please, make your choice"
            )

        try:
            order = self.repo.add(
                OrderModel(
                    user_id=user_id,
                    status=OrderStatus.PENDING,
                    total=truncated_order_total(cart_items),
                    order_date=datetime.now(timezone.utc),
                    shipping_address=shipping_address,
                )
            )

            for cart_item in cart_items:
                book = self.book_repo.get(cart_item.book_id)
                if not book:
                    raise EntityNotFoundError(f"Can't find book by id: {cart_item.book_id}")

                self.repo.add_order_item(
                    order,
                    OrderItemModel(book_id=book.id, quantity=cart_item.quantity, price=book.price),
                )
                self.cart_repo.delete_cart_item(cart, cart_item)

            self.repo.commit()
        except Exception as e:
            logger.error(f"Blad podczas skladania zamowienia dla uzytkownika {user_id}: {e}")
            self.repo.rollback()
            raise

        logger.info(f"Order {order.id} placed by user {user_id}, total {order.total}")
        return order_to_dto(order)

    def list_orders(self, user_id: int) -> List[OrderOut]:
        return [order_to_dto(o) for o in self.repo.find_by_user(user_id)]

    def list_items(self, user_id: int, order_id: int) -> List[OrderItemOut]:
        order = self._get_user_order(user_id, order_id)
        return [order_item_to_dto(i) for i in order.order_items]

    def get_item(self, user_id: int, order_id: int, item_id: int) -> OrderItemOut:
        order = self._get_user_order(user_id, order_id)
        for item in order.order_items:
            if item.id == item_id:
                return order_item_to_dto(item)
        raise EntityNotFoundError(f"Can't find item by id: {item_id}")

    def update_status(self, order_id: int, status: OrderStatus) -> OrderOut:
        # dowolne przejscie statusu jest dozwolone
        order = self.repo.get(order_id)
        if not order:
            raise EntityNotFoundError(f"Can't find order with id: {order_id}")

        previous = order.status
        order.status = status
        self.repo.commit()

        logger.info(f"Order {order_id} status {previous.value} -> {status.value}")
        return order_to_dto(order)
