from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from bookstore.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    shopping_cart_id = Column(
        Integer, ForeignKey("shopping_carts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    is_deleted = Column(Boolean, nullable=False, default=False)

    shopping_cart = relationship("ShoppingCartModel", back_populates="cart_items")
    book = relationship("BookModel")

    __table_args__ = (CheckConstraint("quantity >= 1", name="ck_cart_items_quantity"),)
