"""Custom exceptions for the SDK generation pipeline.

All exceptions carry a code, a message and a details mapping so that callers
can report them as structured errors.
"""

from doc2code.exceptions.base import (
    ConfigurationError,
    Doc2CodeError,
    ValidationError,
)
from doc2code.exceptions.generation import GenerationValidationError, ProgressValidationError
from doc2code.exceptions.provider import (
    EmptyCompletionError,
    ProviderConfigurationError,
    ProviderError,
    ProviderGenerationError,
    UnknownProviderError,
)
from doc2code.exceptions.text import InvalidChunkSizeError, InvalidTokenLimitError

__all__ = [
    # Base exceptions
    "Doc2CodeError",
    "ValidationError",
    "ConfigurationError",
    # Specific exceptions
    "InvalidTokenLimitError",
    "InvalidChunkSizeError",
    "GenerationValidationError",
    "ProgressValidationError",
    "UnknownProviderError",
    "ProviderError",
    "ProviderConfigurationError",
    "ProviderGenerationError",
    "EmptyCompletionError",
]
