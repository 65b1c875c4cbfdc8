# bookstore/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from bookstore.data.models import OrderStatus
from bookstore.domain.validation import fields_match, is_image_reference, is_valid_isbn, normalize_isbn


# =====================================================
# BOOK
# =====================================================
class CreateBookRequest(BaseModel):
    """Schema dla tworzenia i pelnej aktualizacji ksiazki."""

    title: str = Field(..., min_length=1, description="Tytul ksiazki")
    author: str = Field(..., min_length=1, description="Autor ksiazki")
    isbn: str = Field(..., description="ISBN-10 albo ISBN-13")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Cena (>= 0)")
    description: str | None = None
    cover_image: str = Field(..., description="Nazwa/URL pliku z okladka")
    category_ids: set[int] = Field(..., description="ID kategorii ksiazki")

    @field_validator("isbn")
    @classmethod
    def check_isbn(cls, value: str) -> str:
        if not is_valid_isbn(value):
            raise ValueError("Invalid ISBN")
        # zapisujemy i porownujemy forme bez myslnikow i spacji
        return normalize_isbn(value)

    @field_validator("cover_image")
    @classmethod
    def check_cover_image(cls, value: str) -> str:
        if not is_image_reference(value):
            raise ValueError("Invalid image format. Please, enter valid image format")
        return value


class BookOut(BaseModel):
    id: int
    title: str
    author: str
    isbn: str
    price: Decimal
    description: str | None = None
    cover_image: str | None = None
    category_ids: List[int]

    model_config = ConfigDict(from_attributes=True)


class BookWithoutCategoryIdsOut(BaseModel):
    id: int
    title: str
    author: str
    isbn: str
    price: Decimal
    description: str | None = None
    cover_image: str | None = None

    model_config = ConfigDict(from_attributes=True)


class BookSearchParams(BaseModel):
    """Parametry wyszukiwania - kazda grupa opcjonalna, wiele wartosci."""

    title: List[str] | None = None
    author: List[str] | None = None
    isbn: List[str] | None = None
    price: List[str] | None = None


# =====================================================
# CATEGORY
# =====================================================
class CategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Nazwa kategorii")
    description: str | None = None


class CategoryOut(BaseModel):
    id: int
    name: str
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# CART
# =====================================================
class CartItemRequest(BaseModel):
    """Schema dla dodawania ksiazki do koszyka."""

    book_id: int = Field(..., gt=0, description="ID ksiazki (musi byc > 0)")
    quantity: int = Field(..., ge=1, description="Ilosc (musi byc >= 1)")


class CartItemQuantityRequest(BaseModel):
    quantity: int = Field(..., ge=1, description="Nowa ilosc (musi byc >= 1)")


class CartItemOut(BaseModel):
    id: int
    book_id: int
    book_title: str
    quantity: int


class ShoppingCartOut(BaseModel):
    id: int
    user_id: int
    cart_items: List[CartItemOut]


# =====================================================
# ORDER
# =====================================================
class OrderRequest(BaseModel):
    shipping_address: str = Field(..., min_length=1, description="Adres dostawy")


class OrderStatusRequest(BaseModel):
    status: OrderStatus


class OrderItemOut(BaseModel):
    id: int
    book_id: int
    quantity: int


class OrderOut(BaseModel):
    id: int
    user_id: int
    order_items: List[OrderItemOut]
    order_date: datetime
    total: Decimal
    status: OrderStatus
    shipping_address: str


# =====================================================
# USER / AUTH
# =====================================================
class UserRegistrationRequest(BaseModel):
    """Schema dla rejestracji uzytkownika."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)
    repeat_password: str | None = None
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    shipping_address: str | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def passwords_match(self):
        if not fields_match(self.password, self.repeat_password):
            raise ValueError("Your password shouldn't be empty and should match repeat_password")
        return self


class UserLoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)


class UserLoginResponse(BaseModel):
    token: str


class UserOut(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    shipping_address: str | None = None

    model_config = ConfigDict(from_attributes=True)
