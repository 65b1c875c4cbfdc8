# bookstore/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookstore.api.security import admin_only, any_user
from bookstore.data.database import get_db
from bookstore.data.models import UserModel
from bookstore.domain.schemas import OrderItemOut, OrderOut, OrderRequest, OrderStatusRequest
from bookstore.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("", response_model=OrderOut)
def place_order(
    payload: OrderRequest,
    user: UserModel = Depends(any_user),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamowienie z zawartosci koszyka, koszyk zostaje pusty.
    """
    return get_service(db).place_order(user.id, payload.shipping_address)


@router.get("", response_model=List[OrderOut])
def list_orders(user: UserModel = Depends(any_user), db: Session = Depends(get_db)):
    return get_service(db).list_orders(user.id)


@router.get("/{order_id}/items", response_model=List[OrderItemOut])
def list_order_items(
    order_id: int,
    user: UserModel = Depends(any_user),
    db: Session = Depends(get_db),
):
    return get_service(db).list_items(user.id, order_id)


@router.get("/{order_id}/items/{item_id}", response_model=OrderItemOut)
def get_order_item(
    order_id: int,
    item_id: int,
    user: UserModel = Depends(any_user),
    db: Session = Depends(get_db),
):
    return get_service(db).get_item(user.id, order_id, item_id)


@router.patch("/{order_id}", response_model=OrderOut, dependencies=[Depends(admin_only)])
def update_order_status(order_id: int, payload: OrderStatusRequest, db: Session = Depends(get_db)):
    return get_service(db).update_status(order_id, payload.status)
