"""Payload validation utilities."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.models.errors import MappingError
from core.utils.constants import ERROR_CODE_MAPPING_FAILED, ERROR_CODE_MISSING_FIELD

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for display.

    Removes noisy/internal fields like:
    - url
    - ctx
    - input
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "type" in msg_lower:
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def parse_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a decoded response body against a contract model.

    Args:
        model: Pydantic model class describing the expected shape
        payload: Decoded JSON body

    Returns:
        The validated model instance

    Raises:
        MappingError: If the payload is not an object or lacks a required field
    """
    if not isinstance(payload, dict):
        raise MappingError(
            message=f"Expected a JSON object for {model.__name__}",
            details={"received": type(payload).__name__},
        )

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors()
        missing = [err for err in errors if err.get("type") == "missing"]
        raise MappingError(
            message=f"Invalid {model.__name__} payload",
            error_code=ERROR_CODE_MISSING_FIELD if missing else ERROR_CODE_MAPPING_FAILED,
            details={"errors": sanitize_validation_errors(errors)},
        ) from exc
