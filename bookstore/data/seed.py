# bookstore/data/seed.py
from sqlalchemy.orm import Session

from bookstore.data.models import RoleModel, RoleName, UserModel
from bookstore.repos.user_repo import RoleRepo, UserRepo
from bookstore.utils.logging import get_logger
from bookstore.utils.security import hash_password
from bookstore.utils.settings import ADMIN_EMAIL, ADMIN_PASSWORD

logger = get_logger(__name__)


def seed_roles(db: Session) -> None:
    # rejestracja wymaga roli USER w bazie
    repo = RoleRepo(db)
    for name in RoleName:
        if repo.get_by_name(name) is None:
            repo.add(RoleModel(name=name))
            logger.info(f"Seed: role {name.value} created")


def seed_admin(db: Session, email: str | None = ADMIN_EMAIL, password: str | None = ADMIN_PASSWORD) -> None:
    if not email or not password:
        return

    users = UserRepo(db)
    if users.email_taken(email):
        return

    roles = RoleRepo(db)
    admin = UserModel(
        email=email,
        password=hash_password(password),
        first_name="Admin",
        last_name="Admin",
    )
    admin.roles = [roles.get_by_name(RoleName.USER), roles.get_by_name(RoleName.ADMIN)]
    users.add(admin)
    logger.info(f"Seed: admin account {email} created")


def seed(db: Session) -> None:
    """Idempotentne: uzupelnia tylko to, czego brakuje."""
    try:
        seed_roles(db)
        seed_admin(db)
        db.commit()
    except Exception:
        db.rollback()
        raise
