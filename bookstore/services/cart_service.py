# bookstore/services/cart_service.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookstore.data.models import CartItemModel, ShoppingCartModel
from bookstore.domain.exceptions import ConflictError, EntityNotFoundError
from bookstore.domain.mappers import cart_to_dto
from bookstore.domain.schemas import ShoppingCartOut
from bookstore.repos.book_repo import BookRepo
from bookstore.repos.cart_repo import CartRepo
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk uzytkownika.
    get_or_create tworzy koszyk leniwie, reszta operacji wymaga istniejacego koszyka.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.book_repo = BookRepo(db)

    def _get_cart(self, user_id: int, message: str) -> ShoppingCartModel:
        cart = self.repo.get_by_user(user_id)
        if not cart:
            raise EntityNotFoundError(message)
        return cart

    @staticmethod
    def _find_item(cart: ShoppingCartModel, cart_item_id: int) -> CartItemModel:
        for item in cart.cart_items:
            if item.id == cart_item_id:
                return item
        raise EntityNotFoundError(
            f"Can't find cart item with id: {cart_item_id} in your shopping cart"
        )

    #query + leniwe tworzenie
    def get_or_create_cart(self, user_id: int) -> ShoppingCartOut:
        cart = self.repo.get_by_user(user_id)
        if cart:
            return cart_to_dto(cart)

        try:
            cart = self.repo.create_cart(user_id)
            self.repo.commit()
            logger.info(f"Utworzono nowy koszyk {cart.id} dla uzytkownika {user_id}")
        except IntegrityError:
            #rownolegly request utworzyl koszyk pierwszy - czytamy jego wersje
            self.repo.rollback()
            cart = self.repo.get_by_user(user_id)
            if cart is None:
                raise
            logger.info(f"Koszyk dla uzytkownika {user_id} utworzony rownolegle, zwracam istniejacy")

        return cart_to_dto(cart)

    #commands
    def add_item(self, user_id: int, book_id: int, quantity: int) -> ShoppingCartOut:
        cart = self._get_cart(user_id, f"Can't find shopping cart for user with id: {user_id}")

        if any(i.book_id == book_id for i in cart.cart_items):
            raise ConflictError(
                "You already have this book in your cart. Please, choose another book"
            )

        book = self.book_repo.get(book_id)
        if not book:
            raise EntityNotFoundError(f"Can't find book with id: {book_id}")

        self.repo.add_cart_item(cart, CartItemModel(book=book, quantity=quantity))
        self.repo.commit()

        logger.info(f"Ksiazka {book_id} (x{quantity}) dodana do koszyka {cart.id}")
        return cart_to_dto(cart)

    def update_quantity(self, user_id: int, cart_item_id: int, quantity: int) -> ShoppingCartOut:
        cart = self._get_cart(
            user_id, f"Can't find and update shopping cart for user with id: {user_id}"
        )
        item = self._find_item(cart, cart_item_id)

        item.quantity = quantity
        self.repo.commit()

        logger.info(f"Pozycja {cart_item_id} w koszyku {cart.id}: nowa ilosc {quantity}")
        return cart_to_dto(cart)

    def remove_item(self, user_id: int, cart_item_id: int) -> ShoppingCartOut:
        cart = self._get_cart(
            user_id, f"Can't find and update shopping cart for user with id: {user_id}"
        )
        item = self._find_item(cart, cart_item_id)

        self.repo.delete_cart_item(cart, item)
        self.repo.commit()

        logger.info(f"Pozycja {cart_item_id} usunieta z koszyka {cart.id}")
        return cart_to_dto(cart)
