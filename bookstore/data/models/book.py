from sqlalchemy import Boolean, Column, ForeignKey, Integer, Numeric, String, Table, Text, CheckConstraint
from sqlalchemy.orm import relationship

from bookstore.data.database import Base

books_categories = Table(
    "books_categories",
    Base.metadata,
    Column("book_id", Integer, ForeignKey("books.id"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id"), primary_key=True),
)


class BookModel(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    isbn = Column(String(20), nullable=False, unique=True)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=True)
    cover_image = Column(String(255), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)

    #usuniete (soft) kategorie nie sa widoczne w kolekcji
    categories = relationship(
        "CategoryModel",
        secondary=books_categories,
        secondaryjoin="and_(CategoryModel.id == books_categories.c.category_id, "
                      "CategoryModel.is_deleted.is_(False))",
        order_by="CategoryModel.id",
        lazy="selectin",
    )

    __table_args__ = (CheckConstraint("price >= 0", name="ck_books_price"),)
