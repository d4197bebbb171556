"""Provider-related exceptions.

Each provider error names the provider it came from so that the web layer can
report ``Failed to generate SDK with <provider>: <reason>`` to the client.
"""

from typing import Any, Dict, List, Optional

from doc2code.exceptions.base import ConfigurationError, Doc2CodeError, ValidationError


class UnknownProviderError(ValidationError):
    """Raised when a request names a provider that is not registered."""

    def __init__(self, provider: str, available: Optional[List[str]] = None):
        super().__init__(
            code="INVALID_PROVIDER",
            message="Invalid AI provider",
            details={"provider": provider, "available": available or []},
        )
        self.provider = provider


class ProviderError(Doc2CodeError):
    """Base class for failures raised by a provider adapter."""

    default_code = "PROVIDER_ERROR"

    def __init__(
        self,
        provider: str,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details={"provider": provider, **(details or {})})
        self.provider = provider


class ProviderConfigurationError(ProviderError, ConfigurationError):
    """Raised when a provider cannot be called because its credential is missing."""

    def __init__(self, provider: str, env_var: str):
        super().__init__(
            provider=provider,
            code="PROVIDER_NOT_CONFIGURED",
            message=f"{env_var} is not set",
            details={"env_var": env_var},
        )
        self.env_var = env_var


class ProviderGenerationError(ProviderError):
    """Raised when the provider call fails in transport or returns an HTTP error."""

    def __init__(self, provider: str, reason: str, status_code: Optional[int] = None):
        super().__init__(
            provider=provider,
            code="PROVIDER_GENERATION_FAILED",
            message=f"Failed to generate SDK with {provider}: {reason}",
            details={"reason": reason, "status_code": status_code},
        )
        self.reason = reason
        self.status_code = status_code


class EmptyCompletionError(ProviderError):
    """Raised when the provider answers successfully but with no content."""

    def __init__(self, provider: str, model: str):
        super().__init__(
            provider=provider,
            code="EMPTY_COMPLETION",
            message=f"Empty response from {provider} (model '{model}')",
            details={"model": model},
        )
        self.model = model
