import os

# przed importem bookstore - settings czytaja env przy imporcie
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from bookstore.data.database import Base, build_engine, get_db
from bookstore.data.models import RoleName
from bookstore.data.seed import seed_roles
from bookstore.main import create_app
from tests.factories import make_user


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(
        f"sqlite:///{tmp_path / 'bookstore.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    seed_roles(session)
    session.commit()
    yield session
    session.close()


@pytest.fixture
def client(session_factory, db):
    app = create_app(init_database=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user(db):
    return make_user(db)


@pytest.fixture
def admin(db):
    return make_user(db, email="admin@example.com", roles=(RoleName.USER, RoleName.ADMIN))
