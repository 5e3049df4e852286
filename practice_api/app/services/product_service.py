"""
Business logic for products.

``ProductService`` validates product payloads and stores them in the
``products`` collection of the configured :class:`EntityStore`.
"""

import logging
from typing import Any, List

from ..core.store import EntityStore
from ..schemas.product import ProductCreate, ProductRead
from .base import validate_payload


logger = logging.getLogger(__name__)


class ProductService:
    """Create and list products."""

    def __init__(self, store: EntityStore) -> None:
        self.collection = store.products

    async def create_product(self, payload: Any) -> ProductRead:
        """Validate ``payload`` and store it as a new product.

        A missing, non‑numeric or negative price, or a blank name or
        category, raises ``ValidationError`` before anything is stored.
        """
        data = validate_payload(ProductCreate, payload)
        entity = self.collection.create(data.model_dump())
        logger.info("Created product %s (%s)", entity["id"], data.name)
        return ProductRead(**entity)

    async def list_products(self) -> List[ProductRead]:
        return [ProductRead(**entity) for entity in self.collection.list()]
