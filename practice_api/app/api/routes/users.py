"""
User endpoints.

``GET`` lists every user in creation order; ``POST`` validates and
stores a new one.  Both respond with the standard envelope.  Validation
failures surface as ``ValidationError`` and are rendered as 400 by the
application's exception handlers.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from practice_api.app.api.deps import get_user_service
from practice_api.app.schemas.common import Envelope
from practice_api.app.schemas.user import UserRead
from practice_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=Envelope[List[UserRead]], response_model_exclude_none=True)
async def list_users(service: UserService = Depends(get_user_service)) -> Envelope[List[UserRead]]:
    """Return all users.  ``data`` is an empty list when there are none."""
    users = await service.list_users()
    return Envelope[List[UserRead]](success=True, data=users)


@router.post(
    "",
    response_model=Envelope[UserRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    payload: Any = Body(None, examples=[{"name": "Ada Lovelace", "email": "ada@example.com"}]),
    service: UserService = Depends(get_user_service),
) -> Envelope[UserRead]:
    """Create a user from ``{"name", "email"}`` and return it with its id."""
    user = await service.create_user(payload)
    return Envelope[UserRead](success=True, data=user)
