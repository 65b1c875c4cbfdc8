# bookstore/data/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from bookstore.utils.settings import DATABASE_URL

Base = declarative_base()


def build_engine(url: str, **kwargs) -> Engine:
    engine = create_engine(url, pool_pre_ping=True, **kwargs)

    # sqlite domyslnie nie pilnuje kluczy obcych
    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    Sesja na request. Niezacommitowana transakcja jest wycofywana przy close().
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
