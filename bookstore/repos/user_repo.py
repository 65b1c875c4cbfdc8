from sqlalchemy import select
from sqlalchemy.orm import Session

from bookstore.data.models import RoleModel, RoleName, UserModel
from bookstore.repos.base_repo import SoftDeleteRepo


class UserRepo(SoftDeleteRepo[UserModel]):
    model = UserModel

    def __init__(self, db: Session):
        super().__init__(db)

    def get_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            self._select().where(UserModel.email == email)
        ).scalar_one_or_none()

    def email_taken(self, email: str) -> bool:
        # soft-usuniety uzytkownik nadal blokuje email (unique w bazie)
        stmt = select(UserModel.id).where(UserModel.email == email)
        return self.db.execute(stmt).first() is not None


class RoleRepo(SoftDeleteRepo[RoleModel]):
    model = RoleModel

    def get_by_name(self, name: RoleName) -> RoleModel | None:
        return self.db.execute(
            self._select().where(RoleModel.name == name)
        ).scalar_one_or_none()
