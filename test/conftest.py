"""Pytest configuration and fixtures

Provides shared fixtures for all tests: scripted providers that never touch
the network, a progress store that records every update, and a web client
wired to both.
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from doc2code.logger import session_logger
from doc2code.progress import InMemoryProgressStore, ProgressState, ProgressStatus
from doc2code.providers import BaseProvider, ProviderRegistry
from doc2code.ratelimit import DisabledRateLimiter, RateLimiter
from doc2code.web_server import Doc2CodeWebServer, initialize_components

PROVIDER_IDS = ("openai", "openrouter", "groq")


# ============================================================================
# TEST DOUBLES
# ============================================================================


class FakeProvider(BaseProvider):
    """Provider that returns scripted outputs instead of calling an API.

    Each entry in ``outputs`` is returned (or raised, if it is an exception)
    by successive ``generate`` calls; once exhausted, a numbered SDK is returned.
    """

    def __init__(self, provider_id: str, outputs: Optional[Sequence[Union[str, Exception]]] = None):
        super().__init__(api_key="test-key")
        self.provider_id = provider_id
        self.display_name = provider_id
        self.outputs: List[Union[str, Exception]] = list(outputs or [])
        self.calls: List[Tuple[str, str, str]] = []

    async def generate(self, prompt_text: str, language: str, model: str) -> str:
        self.calls.append((prompt_text, language, model))
        if self.outputs:
            output = self.outputs.pop(0)
            if isinstance(output, Exception):
                raise output
            return output
        return f"// {self.provider_id} sdk {len(self.calls)}"


class RecordingProgressStore(InMemoryProgressStore):
    """In-memory store that keeps every update in order."""

    def __init__(self):
        super().__init__()
        self.history: List[Tuple[str, ProgressState]] = []

    def set_progress(self, session_id, current, total, status=ProgressStatus.PROCESSING):
        state = super().set_progress(session_id, current, total, status)
        self.history.append((session_id, state))
        return state

    def sequence(self, session_id: str) -> List[Tuple[int, int, str]]:
        return [(s.current, s.total, s.status) for sid, s in self.history if sid == session_id]


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def fake_providers():
    """One scripted provider per supported provider id."""
    return {provider_id: FakeProvider(provider_id) for provider_id in PROVIDER_IDS}


@pytest.fixture
def provider_registry(fake_providers):
    return ProviderRegistry(fake_providers.values())


@pytest.fixture
def progress_store():
    return RecordingProgressStore()


@pytest.fixture
def rate_limiter() -> RateLimiter:
    """Limiter used by the web client fixture; override to test throttling."""
    return DisabledRateLimiter(10, 3600)


@pytest.fixture
def server(provider_registry, progress_store, rate_limiter):
    components = initialize_components(
        logger=session_logger,
        provider_registry=provider_registry,
        progress_store=progress_store,
        rate_limiter=rate_limiter,
    )
    return Doc2CodeWebServer(components=components)


@pytest.fixture
def client(server):
    """Create a TestClient for the web server."""
    return TestClient(server.app)


@pytest.fixture
def clear_api_keys(monkeypatch):
    """Remove provider credentials from the environment."""
    for env_var in ("OPENAI_API_KEY", "OPENROUTER_API_KEY", "GROQ_API_KEY"):
        monkeypatch.delenv(env_var, raising=False)
