"""
Product endpoints.

Mirrors the user endpoints: list in creation order, or create from
``{"name", "price", "category"}``.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from practice_api.app.api.deps import get_product_service
from practice_api.app.schemas.common import Envelope
from practice_api.app.schemas.product import ProductRead
from practice_api.app.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=Envelope[List[ProductRead]], response_model_exclude_none=True)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> Envelope[List[ProductRead]]:
    products = await service.list_products()
    return Envelope[List[ProductRead]](success=True, data=products)


@router.post(
    "",
    response_model=Envelope[ProductRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    payload: Any = Body(None, examples=[{"name": "Widget", "price": 9.99, "category": "Tools"}]),
    service: ProductService = Depends(get_product_service),
) -> Envelope[ProductRead]:
    """Create a product; a negative or non‑numeric price is rejected with 400."""
    product = await service.create_product(payload)
    return Envelope[ProductRead](success=True, data=product)
