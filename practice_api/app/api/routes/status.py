"""
Liveness endpoint.
"""

from fastapi import APIRouter

from practice_api.app.schemas.common import StatusRead, utc_timestamp

router = APIRouter()


@router.get("", response_model=StatusRead)
async def get_status() -> StatusRead:
    """Report that the server is up, with the current UTC time."""
    return StatusRead(message="Server is running!", timestamp=utc_timestamp())
