"""Model catalogue package."""

from doc2code.models.registry import (
    ModelDescriptor,
    ModelRegistry,
    get_default_model,
    get_default_registry,
    get_model_token_limit,
    get_models_by_provider,
)

__all__ = [
    "ModelDescriptor",
    "ModelRegistry",
    "get_default_model",
    "get_default_registry",
    "get_model_token_limit",
    "get_models_by_provider",
]
