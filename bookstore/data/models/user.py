import enum

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from bookstore.data.database import Base


class RoleName(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


users_roles = Table(
    "users_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id"), primary_key=True),
)


class RoleModel(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True)
    name = Column(Enum(RoleName, native_enum=False, length=20), nullable=False, unique=True)
    is_deleted = Column(Boolean, nullable=False, default=False)


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)  # hash bcrypt, nigdy plaintext
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    shipping_address = Column(String(255), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False)

    roles = relationship("RoleModel", secondary=users_roles, lazy="selectin")

    @property
    def role_names(self) -> set[RoleName]:
        return {r.name for r in self.roles}
