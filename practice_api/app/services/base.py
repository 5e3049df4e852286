"""
Shared validation plumbing for the collection services.
"""

from typing import Any, Type, TypeVar

import pydantic
from pydantic import BaseModel

from ..core.errors import ValidationError
from ..schemas.common import describe_errors


ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(model: Type[ModelT], payload: Any) -> ModelT:
    """Validate ``payload`` against ``model`` or raise ``ValidationError``.

    Nothing has been written to the store when this raises.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(describe_errors(exc.errors())) from exc
