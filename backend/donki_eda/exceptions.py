"""
DONKI EDA - Custom Exceptions.

The analysis pipeline itself never raises for bad data; these cover
misconfiguration detected before any records are touched.
"""

from typing import Any, Dict, Optional


class EdaException(Exception):
    """Base exception for the EDA engine."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class EdaConfigurationError(EdaException):
    """Raised when a configured blacklist pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(
            code="INVALID_BLACKLIST_PATTERN",
            message=f"Invalid blacklist pattern {pattern!r}: {reason}",
            details={"pattern": pattern, "reason": reason},
        )
