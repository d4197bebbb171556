"""Generation request and progress exceptions."""

from typing import List, Optional

from doc2code.exceptions.base import ValidationError


class GenerationValidationError(ValidationError):
    """Raised when a generation request lacks required fields."""

    def __init__(self, missing_fields: List[str]):
        super().__init__(
            code="MISSING_REQUIRED_FIELDS",
            message="Missing required fields: documentation, language, or aiProvider",
            details={"missing_fields": missing_fields},
        )
        self.missing_fields = missing_fields


class ProgressValidationError(ValidationError):
    """Raised when a progress update would break ``0 <= current <= total``."""

    def __init__(self, message: str, session_id: Optional[str] = None):
        super().__init__(
            code="INVALID_PROGRESS",
            message=message,
            details={"session_id": session_id},
        )
        self.session_id = session_id
