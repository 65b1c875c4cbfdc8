# bookstore/api/routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bookstore.data.database import get_db
from bookstore.domain.schemas import UserLoginRequest, UserLoginResponse, UserOut, UserRegistrationRequest
from bookstore.services.auth_service import AuthenticationService
from bookstore.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/registration", response_model=UserOut, status_code=201)
def register(payload: UserRegistrationRequest, db: Session = Depends(get_db)):
    """Rejestracja nowego uzytkownika z rola USER."""
    return UserService(db).register(payload)


@router.post("/login", response_model=UserLoginResponse)
def login(payload: UserLoginRequest, db: Session = Depends(get_db)):
    return AuthenticationService(db).authenticate(payload.email, payload.password)
