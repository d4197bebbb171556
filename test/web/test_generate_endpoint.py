#!/usr/bin/env python3
"""Tests for POST /generate.

Providers are scripted fakes so the endpoint's validation, error mapping and
session handling can be checked without network access.
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from doc2code.exceptions import ProviderConfigurationError, ProviderGenerationError
from doc2code.ratelimit import SlidingWindowRateLimiter


def _alphabet_text(length: int) -> str:
    return "".join(chr(ord("a") + i % 26) for i in range(length))


class TestGenerateSuccess:
    """Successful generation requests."""

    def test_returns_sdk(self, client, fake_providers):
        response = client.post(
            "/generate",
            json={"documentation": "GET /users", "language": "python", "aiProvider": "groq"},
        )

        assert response.status_code == 200
        assert response.json() == {"sdk": "// groq sdk 1"}
        assert fake_providers["groq"].calls[0][2] == "llama3-70b-8192"

    def test_passes_model_and_language(self, client, fake_providers):
        client.post(
            "/generate",
            json={
                "documentation": "GET /users",
                "language": "java",
                "aiProvider": "openrouter",
                "model": "google/gemini-pro",
            },
        )

        assert fake_providers["openrouter"].calls == [("GET /users", "java", "google/gemini-pro")]

    def test_returns_rate_limit_headers(self, client):
        response = client.post(
            "/generate",
            json={"documentation": "GET /users", "language": "python", "aiProvider": "groq"},
        )

        assert response.headers["X-RateLimit-Limit"] == "10"

    def test_session_id_is_echoed(self, client, progress_store):
        response = client.post(
            "/generate",
            json={
                "documentation": "GET /users",
                "language": "python",
                "aiProvider": "groq",
                "sessionId": "client-session",
            },
        )

        assert response.json()["sessionId"] == "client-session"
        assert progress_store.sequence("client-session") == [(1, 1, "complete")]

    def test_chunking_generates_session_id(self, client, progress_store):
        response = client.post(
            "/generate",
            json={
                "documentation": _alphabet_text(40000),
                "language": "python",
                "aiProvider": "groq",
                "useChunking": True,
            },
        )

        assert response.status_code == 200
        session_id = response.json()["sessionId"]
        uuid.UUID(session_id)

        progress = client.get("/progress", params={"sessionId": session_id}).json()
        assert progress["status"] == "complete"
        assert progress["current"] == progress["total"]
        assert progress["total"] > 2


class TestGenerateValidation:
    """Requests rejected with 400."""

    @pytest.mark.parametrize(
        "body",
        [
            {"language": "python", "aiProvider": "groq"},
            {"documentation": "docs", "aiProvider": "groq"},
            {"documentation": "docs", "language": "python"},
            {"documentation": "", "language": "python", "aiProvider": "groq"},
        ],
    )
    def test_missing_fields(self, client, body):
        response = client.post("/generate", json=body)

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required fields: documentation, language, or aiProvider"
        }

    def test_unknown_provider(self, client, fake_providers):
        response = client.post(
            "/generate",
            json={"documentation": "docs", "language": "python", "aiProvider": "bogus"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid AI provider"}
        assert all(p.calls == [] for p in fake_providers.values())

    def test_invalid_json(self, client):
        response = client.post(
            "/generate", content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_non_object_body(self, client):
        response = client.post("/generate", json=["documentation"])
        assert response.status_code == 400

    def test_wrong_field_type(self, client):
        response = client.post(
            "/generate",
            json={
                "documentation": "docs",
                "language": "python",
                "aiProvider": "groq",
                "useChunking": "sometimes",
            },
        )
        assert response.status_code == 400


class TestGenerateProviderErrors:
    """Provider failures are reported with 500."""

    def test_generation_error_message(self, client, fake_providers):
        fake_providers["groq"].outputs = [ProviderGenerationError("Groq", "Connection error.")]

        response = client.post(
            "/generate",
            json={"documentation": "docs", "language": "python", "aiProvider": "groq"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate SDK with groq: Connection error."}

    def test_missing_key_message(self, client, fake_providers):
        fake_providers["openai"].outputs = [
            ProviderConfigurationError("OpenAI", "OPENAI_API_KEY")
        ]

        response = client.post(
            "/generate",
            json={"documentation": "docs", "language": "python", "aiProvider": "openai"},
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to generate SDK with openai: OPENAI_API_KEY is not set"
        }

    def test_unexpected_error(self, client, fake_providers):
        fake_providers["groq"].outputs = [RuntimeError("boom")]

        response = client.post(
            "/generate",
            json={"documentation": "docs", "language": "python", "aiProvider": "groq"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate SDK due to an unexpected error"}


class TestGenerateRateLimit:
    """Rate limiting of POST /generate."""

    @pytest.fixture
    def rate_limiter(self):
        return SlidingWindowRateLimiter(2, 3600)

    def test_third_request_is_rejected(self, client, fake_providers):
        body = {"documentation": "docs", "language": "python", "aiProvider": "groq"}
        headers = {"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}

        assert client.post("/generate", json=body, headers=headers).status_code == 200
        assert client.post("/generate", json=body, headers=headers).status_code == 200
        response = client.post("/generate", json=body, headers=headers)

        assert response.status_code == 429
        assert response.json() == {"error": "Rate limit exceeded. Please try again later."}
        assert response.headers["X-RateLimit-Limit"] == "2"
        assert response.headers["X-RateLimit-Remaining"] == "0"
        assert "X-RateLimit-Reset" in response.headers
        assert len(fake_providers["groq"].calls) == 2

    def test_clients_are_limited_separately(self, client):
        body = {"documentation": "docs", "language": "python", "aiProvider": "groq"}
        for _ in range(2):
            client.post("/generate", json=body, headers={"X-Forwarded-For": "203.0.113.7"})

        response = client.post("/generate", json=body, headers={"X-Forwarded-For": "198.51.100.2"})
        assert response.status_code == 200

    def test_rejected_before_body_is_read(self, client):
        headers = {"X-Forwarded-For": "203.0.113.9"}
        for _ in range(2):
            client.post("/generate", json={}, headers=headers)

        response = client.post("/generate", content="{not json", headers=headers)
        assert response.status_code == 429


class TestDefaultServer:
    def test_builds_components_from_configuration(self, monkeypatch):
        from doc2code.web_server import Doc2CodeWebServer

        monkeypatch.setenv("DOC2CODE_RATE_LIMIT_ENABLED", "false")
        server = Doc2CodeWebServer()

        assert server.provider_registry.provider_ids() == ["openai", "openrouter", "groq"]
        assert TestClient(server.app).get("/ping").status_code == 200


class TestGenerateTokenBudget:
    """Server token settings never turn a valid request into a client error."""

    def test_large_reserve_still_chunks(self, client, server):
        server.orchestrator.reserve_tokens = 4900

        response = client.post(
            "/generate",
            json={
                "documentation": _alphabet_text(600),
                "language": "python",
                "aiProvider": "groq",
                "useChunking": True,
            },
        )

        assert response.status_code == 200
        assert "sdk" in response.json()

    def test_reserve_above_limit_is_server_error(self, client, server, fake_providers):
        server.orchestrator.reserve_tokens = 6000

        response = client.post(
            "/generate",
            json={"documentation": "GET /users", "language": "python", "aiProvider": "groq"},
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to generate SDK due to a server configuration error"
        }
        assert fake_providers["groq"].calls == []
