import enum
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from bookstore.data.database import Base


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    CANCELED = "CANCELED"
    COMPLETED = "COMPLETED"
    DELIVERED = "DELIVERED"


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    status = Column(
        Enum(OrderStatus, native_enum=False, length=20),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    total = Column(Numeric(10, 2), nullable=False)
    order_date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    shipping_address = Column(String(255), nullable=False)
    is_deleted = Column(Boolean, nullable=False, default=False)

    order_items = relationship(
        "OrderItemModel",
        back_populates="order",
        primaryjoin="and_(OrderModel.id == OrderItemModel.order_id, "
                    "OrderItemModel.is_deleted.is_(False))",
        order_by="OrderItemModel.id",
        lazy="selectin",
    )
