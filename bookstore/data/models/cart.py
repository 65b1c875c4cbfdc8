from sqlalchemy import Boolean, Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from bookstore.data.database import Base


class ShoppingCartModel(Base):
    __tablename__ = "shopping_carts"

    #id koszyka == id uzytkownika, PK pilnuje jednego koszyka na usera
    id = Column(Integer, ForeignKey("users.id"), primary_key=True, autoincrement=False)
    is_deleted = Column(Boolean, nullable=False, default=False)

    user = relationship("UserModel")
    cart_items = relationship(
        "CartItemModel",
        back_populates="shopping_cart",
        primaryjoin="and_(ShoppingCartModel.id == CartItemModel.shopping_cart_id, "
                    "CartItemModel.is_deleted.is_(False))",
        cascade="all, delete-orphan",
        order_by="CartItemModel.id",
    )

    @property
    def user_id(self) -> int:
        return self.id
