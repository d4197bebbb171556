"""Base exception classes for the doc2code application.

Every error carries a machine-readable ``code``, a human-readable ``message``
and an optional ``details`` mapping so the web layer can turn it into a JSON
error body without inspecting message text.
"""

from typing import Any, Dict, Optional


class Doc2CodeError(Exception):
    """Root of the doc2code exception hierarchy."""

    default_code = "DOC2CODE_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the error for logging or API responses."""
        return {"code": self.code, "message": self.message, "details": self.details}

    def __str__(self) -> str:
        return self.message


class ValidationError(Doc2CodeError):
    """Raised when caller-supplied input is invalid."""

    default_code = "VALIDATION_ERROR"


class ConfigurationError(Doc2CodeError):
    """Raised when required configuration is missing or malformed."""

    default_code = "CONFIGURATION_ERROR"


__all__ = [
    "Doc2CodeError",
    "ValidationError",
    "ConfigurationError",
]
