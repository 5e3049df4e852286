"""
FastAPI dependencies that hand services to the route handlers.

The store lives on ``app.state`` (set by ``create_app``), so every
application instance, including the ones built in tests, has its own
isolated data.
"""

from fastapi import Depends, Request

from ..core.store import EntityStore
from ..services.product_service import ProductService
from ..services.user_service import UserService


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_user_service(store: EntityStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_product_service(store: EntityStore = Depends(get_store)) -> ProductService:
    return ProductService(store)
