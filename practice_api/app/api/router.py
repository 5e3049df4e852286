"""
Top‑level API router.

Aggregates the per‑collection routers under the ``/api`` prefix applied
by ``create_app``.  When a new collection is added, include its router
here.
"""

from fastapi import APIRouter

from .routes import products, status, users

router = APIRouter()

router.include_router(status.router, prefix="/status", tags=["status"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
