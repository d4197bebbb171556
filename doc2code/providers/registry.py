"""
Provider registry.

Maps provider identifiers to adapters so call sites dispatch through one
``generate`` contract instead of switching on provider strings.
"""

from typing import Dict, Iterable, List, Optional

from doc2code.exceptions import UnknownProviderError
from doc2code.logger import Logger, session_logger
from doc2code.providers.base_provider import BaseProvider
from doc2code.providers.groq_provider import GroqProvider
from doc2code.providers.openai_provider import OpenAIProvider
from doc2code.providers.openrouter_provider import OpenRouterProvider

PROVIDER_CLASSES = {
    "openai": OpenAIProvider,
    "openrouter": OpenRouterProvider,
    "groq": GroqProvider,
}


class ProviderRegistry:
    """Lookup of provider adapters by identifier."""

    def __init__(self, providers: Optional[Iterable[BaseProvider]] = None):
        self._providers: Dict[str, BaseProvider] = {}
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: BaseProvider) -> None:
        self._providers[provider.provider_id] = provider

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def get(self, provider_id: str) -> BaseProvider:
        """
        Return the adapter for ``provider_id``.

        Raises:
            UnknownProviderError: If no adapter is registered under that id
        """
        provider = self._providers.get(provider_id)
        if provider is None:
            raise UnknownProviderError(provider_id, available=self.provider_ids())
        return provider

    def provider_ids(self) -> List[str]:
        return list(self._providers)


def create_provider_registry(logger: Logger = session_logger) -> ProviderRegistry:
    """Registry with the OpenAI, OpenRouter and Groq adapters."""
    return ProviderRegistry(cls(logger=logger) for cls in PROVIDER_CLASSES.values())
