"""Custom exception classes for the catalog client."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_MAPPING_FAILED,
    ERROR_CODE_STALE_RESPONSE,
    ERROR_CODE_TRANSPORT_FAILED,
)


class CatalogClientError(Exception):
    """
    Base exception for all catalog client errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class TransportFailure(CatalogClientError):
    """Raised when a request did not complete or returned a non-success status."""

    status: int | None

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_TRANSPORT_FAILED,
        status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status = status
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class MappingError(CatalogClientError):
    """Raised when a response payload lacks a field the view requires."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_MAPPING_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class StaleResponseError(CatalogClientError):
    """Raised when a response belongs to a request that has been superseded."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STALE_RESPONSE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
