# bookstore/services/auth_service.py
import jwt
from sqlalchemy.orm import Session

from bookstore.data.models import UserModel
from bookstore.domain.exceptions import AuthenticationError
from bookstore.domain.schemas import UserLoginResponse
from bookstore.repos.user_repo import UserRepo
from bookstore.utils.logging import get_logger
from bookstore.utils.security import create_token, decode_token, verify_password

logger = get_logger(__name__)


class AuthenticationService:
    """
    Logowanie i rozpoznawanie uzytkownika po tokenie.
    Komunikat bledu zawsze ten sam - nie zdradzamy czy zly byl email czy haslo.
    """

    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def authenticate(self, email: str, password: str) -> UserLoginResponse:
        user = self.repo.get_by_email(email)
        if not user or not verify_password(password, user.password):
            logger.info("Nieudana proba logowania")
            raise AuthenticationError()

        return UserLoginResponse(token=create_token(user.email))

    def resolve_user(self, token: str) -> UserModel:
        try:
            email = decode_token(token)
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid or expired token")

        user = self.repo.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid or expired token")
        return user
