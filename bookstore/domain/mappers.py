# bookstore/domain/mappers.py
"""
Konwersje model <-> schema. Funkcje czyste, bez dostepu do bazy.
Pola wyliczane (id kategorii, pozycje koszyka/zamowienia) uzupelniane jawnie.
"""
from typing import Iterable

from bookstore.data.models import (
    BookModel,
    CartItemModel,
    CategoryModel,
    OrderItemModel,
    OrderModel,
    ShoppingCartModel,
    UserModel,
)
from bookstore.domain.schemas import (
    BookOut,
    BookWithoutCategoryIdsOut,
    CartItemOut,
    CategoryOut,
    CategoryRequest,
    CreateBookRequest,
    OrderItemOut,
    OrderOut,
    ShoppingCartOut,
    UserOut,
)


# BOOK
def book_to_entity(request: CreateBookRequest, categories: Iterable[CategoryModel]) -> BookModel:
    book = BookModel(
        title=request.title,
        author=request.author,
        isbn=request.isbn,
        price=request.price,
        description=request.description,
        cover_image=request.cover_image,
    )
    book.categories = list(categories)
    return book


def book_to_dto(book: BookModel) -> BookOut:
    return BookOut(
        id=book.id,
        title=book.title,
        author=book.author,
        isbn=book.isbn,
        price=book.price,
        description=book.description,
        cover_image=book.cover_image,
        category_ids=[c.id for c in book.categories],
    )


def book_to_dto_without_categories(book: BookModel) -> BookWithoutCategoryIdsOut:
    return BookWithoutCategoryIdsOut.model_validate(book)


# CATEGORY
def category_to_entity(request: CategoryRequest) -> CategoryModel:
    return CategoryModel(name=request.name, description=request.description)


def category_to_dto(category: CategoryModel) -> CategoryOut:
    return CategoryOut.model_validate(category)


# CART
def cart_item_to_dto(item: CartItemModel) -> CartItemOut:
    return CartItemOut(
        id=item.id,
        book_id=item.book_id,
        book_title=item.book.title,
        quantity=item.quantity,
    )


def cart_to_dto(cart: ShoppingCartModel) -> ShoppingCartOut:
    return ShoppingCartOut(
        id=cart.id,
        user_id=cart.user_id,
        cart_items=[cart_item_to_dto(i) for i in cart.cart_items],
    )


# ORDER
def order_item_to_dto(item: OrderItemModel) -> OrderItemOut:
    return OrderItemOut(id=item.id, book_id=item.book_id, quantity=item.quantity)


def order_to_dto(order: OrderModel) -> OrderOut:
    return OrderOut(
        id=order.id,
        user_id=order.user_id,
        order_items=[order_item_to_dto(i) for i in order.order_items],
        order_date=order.order_date,
        total=order.total,
        status=order.status,
        shipping_address=order.shipping_address,
    )


# USER
def user_to_dto(user: UserModel) -> UserOut:
    return UserOut.model_validate(user)
