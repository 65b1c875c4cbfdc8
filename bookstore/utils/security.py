# bookstore/utils/security.py
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from bookstore.utils.settings import JWT_ALGORITHM, JWT_EXPIRATION_MINUTES, JWT_SECRET

# bcrypt bierze pod uwage tylko pierwsze 72 bajty hasla
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # zly format hasha w bazie
        return False


def create_token(subject: str, expires_minutes: int = JWT_EXPIRATION_MINUTES) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": subject,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> str:
    """Zwraca subject (email). Rzuca jwt.InvalidTokenError przy zlym/wygaslym tokenie."""
    payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    subject = payload.get("sub")
    if not subject:
        raise jwt.InvalidTokenError("Token has no subject")
    return subject
