# bookstore/api/__init__.py
from fastapi import FastAPI

from bookstore.api.errors import register_exception_handlers
from bookstore.api.routers import auth, books, cart, categories, health, orders


def include_api(app: FastAPI) -> FastAPI:
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(books.router)
    app.include_router(categories.router)
    app.include_router(cart.router)
    app.include_router(orders.router)
    return app
