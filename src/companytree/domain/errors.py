from __future__ import annotations

"""
Domain Exceptions and Error Codes.

Defines the exception hierarchy raised by the fetching and tree-building
layers. Every exception carries an ErrorCode so the CLI can render a stable,
human-readable message and choose an exit status.

Usage:
    from companytree.domain.errors import NetworkError

    raise NetworkError("Connection refused", url=url)
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(str, Enum):
    """Stable identifiers for failure categories."""

    # Fetching
    NETWORK_ERROR = "NETWORK_ERROR"
    DECODE_ERROR = "DECODE_ERROR"

    # Tree construction
    TREE_CYCLE = "TREE_CYCLE"

    # Runtime
    INVALID_CONFIG = "INVALID_CONFIG"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.NETWORK_ERROR: "Unable to reach the remote data source.",
    ErrorCode.DECODE_ERROR: "The remote data source returned an unreadable response.",
    ErrorCode.TREE_CYCLE: "Company hierarchy contains a parent cycle.",
    ErrorCode.INVALID_CONFIG: "The supplied configuration is invalid.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred.",
}


class CompanyTreeError(Exception):
    """Base exception for all companytree errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class NetworkError(CompanyTreeError):
    """Transport-level failure while performing an HTTP request."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message, code=ErrorCode.NETWORK_ERROR)


class DecodeError(CompanyTreeError):
    """Response body is not valid JSON or not a JSON array."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message, code=ErrorCode.DECODE_ERROR)


class TreeCycleError(CompanyTreeError):
    """A company was reached again while descending its own ancestry."""

    def __init__(self, company_id: str):
        self.company_id = company_id
        super().__init__(
            f"Parent cycle detected at company '{company_id}'.",
            code=ErrorCode.TREE_CYCLE,
        )


class ConfigError(CompanyTreeError):
    """Configuration rejected in strict validation mode."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.INVALID_CONFIG)
