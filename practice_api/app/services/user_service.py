"""
Business logic for users.

``UserService`` validates user payloads and stores them in the
``users`` collection of the configured :class:`EntityStore`.
"""

import logging
from typing import Any, List

from ..core.store import EntityStore
from ..schemas.user import UserCreate, UserRead
from .base import validate_payload


logger = logging.getLogger(__name__)


class UserService:
    """Create and list users."""

    def __init__(self, store: EntityStore) -> None:
        self.collection = store.users

    async def create_user(self, payload: Any) -> UserRead:
        """Validate ``payload`` and store it as a new user.

        Raises :class:`~practice_api.app.core.errors.ValidationError`
        if the name or email is missing or malformed.
        """
        data = validate_payload(UserCreate, payload)
        entity = self.collection.create(data.model_dump())
        logger.info("Created user %s", entity["id"])
        return UserRead(**entity)

    async def list_users(self) -> List[UserRead]:
        return [UserRead(**entity) for entity in self.collection.list()]
