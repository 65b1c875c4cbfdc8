# bookstore/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from bookstore.api import include_api
from bookstore.data import models  # noqa: F401 - rejestracja modeli w Base.metadata
from bookstore.data.database import Base, SessionLocal, engine
from bookstore.data.seed import seed
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)


def init_db(bind=engine, session_factory=SessionLocal) -> None:
    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=bind)

    db = session_factory()
    try:
        seed(db)
    finally:
        db.close()
    logger.info("Database ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app(init_database: bool = True) -> FastAPI:
    app = FastAPI(
        title="Bookstore Service",
        version="1.0.0",
        lifespan=lifespan if init_database else None,
    )
    return include_api(app)


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
