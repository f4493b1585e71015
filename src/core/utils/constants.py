"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Transport Errors
ERROR_CODE_TRANSPORT_FAILED = "TRANSPORT_FAILED"
ERROR_CODE_UNEXPECTED_STATUS = "UNEXPECTED_STATUS"
ERROR_CODE_INVALID_JSON = "INVALID_JSON"

# Mapping Errors
ERROR_CODE_MAPPING_FAILED = "MAPPING_FAILED"
ERROR_CODE_MISSING_FIELD = "MISSING_FIELD"

# Sequencing
ERROR_CODE_STALE_RESPONSE = "STALE_RESPONSE"

# ============================================================================
# Catalog Endpoint
# ============================================================================

DEFAULT_BASE_URL = "http://localhost"
DEFAULT_SEARCH_PATH = "/images"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_ACCEPT_HEADER = "application/json"

# ============================================================================
# Query Parameter Spellings
# ============================================================================

PARAMETER_SPELLING_CURRENT = "current"
PARAMETER_SPELLING_TAGS = "tags"
PARAMETER_SPELLING_HYPHENATED = "hyphenated"

DEFAULT_PARAMETER_SPELLING: Final[str] = PARAMETER_SPELLING_CURRENT

# ============================================================================
# Display
# ============================================================================

AUTHOR_SEPARATOR: Final[str] = ", "
MAX_ERROR_INFO_LENGTH = 200

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_CATALOG_BASE_URL = "CATALOG_BASE_URL"
ENV_CATALOG_SEARCH_PATH = "CATALOG_SEARCH_PATH"
ENV_CATALOG_PARAMETER_SPELLING = "CATALOG_PARAMETER_SPELLING"
ENV_CATALOG_REQUEST_TIMEOUT = "CATALOG_REQUEST_TIMEOUT"

# ============================================================================
# Helper Functions
# ============================================================================


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
