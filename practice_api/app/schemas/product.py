"""
Pydantic models for product data.

Products carry a name, a category and a non‑negative price.  Prices
must arrive as JSON numbers: numeric strings and booleans are
rejected rather than coerced.
"""

import math
from typing import Any, Union

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator


class ProductCreate(BaseModel):
    """Schema for creating a product."""

    name: StrictStr = Field(..., examples=["Widget"])
    # Integers stay integers so a price of 5 is returned as 5, not 5.0.
    price: Union[StrictInt, float] = Field(..., examples=[9.99])
    category: StrictStr = Field(..., examples=["Tools"])

    @field_validator("name", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def valid_price(cls, v: Any) -> Any:
        # bool is a subclass of int, so it has to be excluded explicitly.
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("must be a number")
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("must be a finite number")
        if v < 0:
            raise ValueError("must not be negative")
        return v


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: str
    name: str
    price: Union[StrictInt, float]
    category: str
