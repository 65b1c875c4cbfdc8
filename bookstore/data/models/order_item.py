from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from bookstore.data.database import Base


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)  # cena z chwili zlozenia zamowienia
    is_deleted = Column(Boolean, nullable=False, default=False)

    order = relationship("OrderModel", back_populates="order_items")
    book = relationship("BookModel")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity"),
        CheckConstraint("price >= 0", name="ck_order_items_price"),
    )
