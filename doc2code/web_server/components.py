"""Component initialization for the web server.

Builds the registries, stores and orchestrator once per server instance so
that nothing relies on module-level mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from doc2code.generation import GenerationOrchestrator
from doc2code.logger import Logger
from doc2code.models import ModelRegistry
from doc2code.progress import InMemoryProgressStore, ProgressStore
from doc2code.providers import ProviderRegistry, create_provider_registry
from doc2code.ratelimit import RateLimiter, create_rate_limiter


@dataclass
class ServerComponents:
    provider_registry: ProviderRegistry
    model_registry: ModelRegistry
    progress_store: ProgressStore
    rate_limiter: RateLimiter
    orchestrator: GenerationOrchestrator


def initialize_components(
    *,
    logger: Logger,
    provider_registry: Optional[ProviderRegistry] = None,
    model_registry: Optional[ModelRegistry] = None,
    progress_store: Optional[ProgressStore] = None,
    rate_limiter: Optional[RateLimiter] = None,
) -> ServerComponents:
    """Initialize all server components.

    Args:
        logger: Logger
        provider_registry: Provider adapters (defaults to OpenAI, OpenRouter and Groq)
        model_registry: Model catalogue (defaults to the bundled catalogue)
        progress_store: Progress store (defaults to a fresh in-memory store)
        rate_limiter: Rate limiter (defaults to the configured variant)
    """
    if provider_registry is None:
        provider_registry = create_provider_registry(logger=logger)
    if model_registry is None:
        model_registry = ModelRegistry(logger=logger)
    if progress_store is None:
        progress_store = InMemoryProgressStore(logger=logger)
    if rate_limiter is None:
        rate_limiter = create_rate_limiter(logger=logger)

    orchestrator = GenerationOrchestrator(
        provider_registry=provider_registry,
        model_registry=model_registry,
        progress_store=progress_store,
        logger=logger,
    )
    logger.info("Server components initialized", providers=",".join(provider_registry.provider_ids()))

    return ServerComponents(
        provider_registry=provider_registry,
        model_registry=model_registry,
        progress_store=progress_store,
        rate_limiter=rate_limiter,
        orchestrator=orchestrator,
    )
