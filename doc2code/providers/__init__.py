"""LLM provider adapters."""

from doc2code.providers.base_provider import BaseProvider
from doc2code.providers.groq_provider import GroqProvider
from doc2code.providers.openai_provider import OpenAIProvider
from doc2code.providers.openrouter_provider import OpenRouterProvider
from doc2code.providers.registry import (
    PROVIDER_CLASSES,
    ProviderRegistry,
    create_provider_registry,
)

__all__ = [
    "BaseProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
    "GroqProvider",
    "PROVIDER_CLASSES",
    "ProviderRegistry",
    "create_provider_registry",
]
