# bookstore/api/security.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bookstore.data.database import get_db
from bookstore.data.models import RoleName, UserModel
from bookstore.domain.exceptions import AuthenticationError, AuthorizationError
from bookstore.services.auth_service import AuthenticationService

_bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    db: Session = Depends(get_db),
) -> UserModel:
    """Uzytkownik z tokenu Bearer. Id uzytkownika nigdy nie przychodzi w body."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Authentication required")
    return AuthenticationService(db).resolve_user(credentials.credentials)


def require_roles(*roles: RoleName):
    allowed = set(roles)

    def dependency(user: UserModel = Depends(get_current_user)) -> UserModel:
        if not allowed & user.role_names:
            raise AuthorizationError()
        return user

    return dependency


any_user = require_roles(RoleName.USER, RoleName.ADMIN)
admin_only = require_roles(RoleName.ADMIN)
