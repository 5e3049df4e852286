"""
Pydantic models for user data.

A user is a name and an email address.  The identifier is assigned by
the store and never read from the request; an ``id`` key sent by a
client is ignored.
"""

import re

from pydantic import BaseModel, Field, StrictStr, field_validator


# local@domain.tld with no whitespace and a single "@".
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")


class UserCreate(BaseModel):
    """Schema for creating a user.

    Both fields are required.  Values are stored exactly as sent; the
    emptiness check ignores surrounding whitespace, so ``"  "`` is
    rejected but ``" Ann "`` is kept verbatim.
    """

    name: StrictStr = Field(..., examples=["Ada Lovelace"])
    email: StrictStr = Field(..., examples=["ada@example.com"])

    @field_validator("name", "email")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def email_shape(cls, v: str) -> str:
        if not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("must be a valid email address")
        return v


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    name: str
    email: str
