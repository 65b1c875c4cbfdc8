# bookstore/api/routers/cart.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookstore.api.security import any_user
from bookstore.data.database import get_db
from bookstore.data.models import UserModel
from bookstore.domain.schemas import CartItemQuantityRequest, CartItemRequest, ShoppingCartOut
from bookstore.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=ShoppingCartOut)
def get_cart(user: UserModel = Depends(any_user), db: Session = Depends(get_db)):
    return get_service(db).get_or_create_cart(user.id)


@router.post("", response_model=ShoppingCartOut)
def add_item(
    payload: CartItemRequest,
    user: UserModel = Depends(any_user),
    db: Session = Depends(get_db),
):
    return get_service(db).add_item(user.id, payload.book_id, payload.quantity)


@router.put("/cart-items/{cart_item_id}", response_model=ShoppingCartOut)
def update_item(
    cart_item_id: int,
    payload: CartItemQuantityRequest,
    user: UserModel = Depends(any_user),
    db: Session = Depends(get_db),
):
    return get_service(db).update_quantity(user.id, cart_item_id, payload.quantity)


@router.delete("/cart-items/{cart_item_id}", response_model=ShoppingCartOut)
def remove_item(
    cart_item_id: int,
    user: UserModel = Depends(any_user),
    db: Session = Depends(get_db),
):
    return get_service(db).remove_item(user.id, cart_item_id)
