from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookstore.data.models import RoleName, UserModel
from bookstore.domain.exceptions import EntityNotFoundError, RegistrationError
from bookstore.domain.mappers import user_to_dto
from bookstore.domain.schemas import UserOut, UserRegistrationRequest
from bookstore.repos.user_repo import RoleRepo, UserRepo
from bookstore.utils.logging import get_logger
from bookstore.utils.security import hash_password

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)
        self.role_repo = RoleRepo(db)

    def register(self, payload: UserRegistrationRequest) -> UserOut:
        if self.repo.email_taken(payload.email):
            raise RegistrationError(
                "User with such email is already present. Please, enter another email"
            )

        role = self.role_repo.get_by_name(RoleName.USER)
        if not role:
            raise RegistrationError(f"Can't find role: {RoleName.USER.value}")

        user = UserModel(
            email=payload.email,
            password=hash_password(payload.password),
            first_name=payload.first_name,
            last_name=payload.last_name,
            shipping_address=payload.shipping_address,
        )
        user.roles = [role]

        try:
            self.repo.add(user)
            self.repo.commit()
        except IntegrityError:
            self.repo.rollback()
            raise RegistrationError(
                "User with such email is already present. Please, enter another email"
            )

        logger.info(f"Zarejestrowano uzytkownika {user.id}")
        return user_to_dto(user)

    def get_by_email(self, email: str) -> UserOut:
        user = self.repo.get_by_email(email)
        if not user:
            raise EntityNotFoundError(f"Can't find user by email: {email}")
        return user_to_dto(user)
