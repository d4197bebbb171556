"""doc2code Web Server - REST API for SDK generation.

Exposes:
- SDK generation from API documentation (POST /generate)
- Progress tracking for chunked generation (GET/POST /progress)
- Discovery of configured providers, models and target languages
- Ingestion of browser-side log entries (POST /logs)

All errors are returned as ``{"error": "<message>"}``.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from doc2code.config import Config
from doc2code.exceptions import (
    ConfigurationError,
    ProviderError,
    ProviderGenerationError,
    ValidationError,
)
from doc2code.generation import GenerationRequest
from doc2code.languages import SUPPORTED_LANGUAGES
from doc2code.logger import Logger, session_logger
from doc2code.web_server.components import ServerComponents, initialize_components
from doc2code.web_server.models import ClientLogsInput, GenerateSDKInput, ProgressUpdateInput

CLIENT_LOG_LEVELS = ("info", "warn", "error", "debug")


def _error(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


class Doc2CodeWebServer:
    """FastAPI web server for SDK generation."""

    def __init__(
        self,
        components: Optional[ServerComponents] = None,
        logger: Logger = session_logger,
    ):
        """
        Initialize the doc2code web server.

        Args:
            components: Pre-built server components (providers, stores, limiter);
                built from configuration when omitted
            logger: Logger instance

        Endpoints exposed:
            GET /ping - Health check
            POST /generate - Generate an SDK from documentation
            POST /progress - Record progress for a session
            GET /progress - Read progress for a session
            GET /check-api-keys - Which provider credentials are configured
            GET /models - Models per provider
            GET /languages - Supported target languages
            POST /logs - Ingest client-side log entries
        """
        self.app = FastAPI(title="doc2code", description="Generate SDKs from API documentation")
        self.logger: Logger = logger
        self.components = components or initialize_components(logger=logger)

        self.provider_registry = self.components.provider_registry
        self.model_registry = self.components.model_registry
        self.progress_store = self.components.progress_store
        self.rate_limiter = self.components.rate_limiter
        self.orchestrator = self.components.orchestrator

        self.logger.info(
            "doc2code web server initialized",
            providers=",".join(self.provider_registry.provider_ids()),
            rate_limiter=type(self.rate_limiter).__name__,
        )
        self._setup_routes()

    def _client_address(self, request: Request) -> str:
        """First X-Forwarded-For address, else the peer address, else "anonymous"."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            first = forwarded.split(",")[0].strip()
            if first:
                return first
        if request.client and request.client.host:
            return request.client.host
        return "anonymous"

    async def _read_json(self, request: Request) -> Any:
        try:
            return await request.json()
        except ValueError as e:
            self.logger.error("Failed to parse request body", error=str(e))
            return None

    def _setup_routes(self):
        """Set up all API routes."""

        @self.app.get("/ping")
        async def ping():
            """Health check endpoint."""
            current_time = datetime.now().isoformat()
            self.logger.debug("GET /ping", timestamp=current_time)
            return JSONResponse(
                content={"status": "ok", "timestamp": current_time, "service": "doc2code"}
            )

        # ====================================================================
        # GENERATION
        # ====================================================================

        @self.app.post("/generate")
        async def generate_sdk(request: Request):
            """
            Generate an SDK from API documentation.

            Request body:
            - documentation: API documentation text or JSON (required)
            - language: Target language (required)
            - aiProvider: openai | openrouter | groq (required)
            - model: Provider model id (optional, provider default otherwise)
            - minify: Strip comments and whitespace first (optional)
            - useChunking: Split long documentation into parts (optional)
            - sessionId: Progress session id to report into (optional)
            """
            client_address = self._client_address(request)
            self.logger.info(f"Processing request from IP: {client_address}")

            rate = self.rate_limiter.limit(client_address)
            if not rate.success:
                self.logger.warning(f"Rate limit exceeded for IP: {client_address}")
                return _error(
                    429, "Rate limit exceeded. Please try again later.", headers=rate.headers()
                )

            body = await self._read_json(request)
            if not isinstance(body, dict):
                return _error(400, "Invalid request body")

            try:
                payload = GenerateSDKInput.model_validate(body)
            except PydanticValidationError as e:
                self.logger.warning("Invalid generate request", error_count=e.error_count())
                return _error(400, "Invalid request body")

            session_id = payload.session_id
            if session_id is None and payload.use_chunking:
                session_id = str(uuid.uuid4())

            generation_request = GenerationRequest(
                documentation=payload.documentation or "",
                language=payload.language or "",
                provider=payload.ai_provider or "",
                model=payload.model,
                minify=payload.minify,
                use_chunking=payload.use_chunking,
                session_id=session_id,
            )

            try:
                result = await self.orchestrator.generate(generation_request)
            except ValidationError as e:
                self.logger.warning("Generate request rejected", code=e.code, error=e.message)
                return _error(400, e.message)
            except ProviderError as e:
                reason = e.reason if isinstance(e, ProviderGenerationError) else e.message
                self.logger.error(
                    f"Error generating SDK with {payload.ai_provider}",
                    code=e.code,
                    error=reason,
                )
                return _error(500, f"Failed to generate SDK with {payload.ai_provider}: {reason}")
            except ConfigurationError as e:
                self.logger.error("Generation misconfigured", code=e.code, error=e.message)
                return _error(500, "Failed to generate SDK due to a server configuration error")
            except Exception as e:
                self.logger.error(
                    "Unhandled error in generate route",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return _error(500, "Failed to generate SDK due to an unexpected error")

            content: Dict[str, Any] = {"sdk": result.sdk}
            if session_id:
                content["sessionId"] = session_id
            return JSONResponse(content=content, headers=rate.headers())

        # ====================================================================
        # PROGRESS
        # ====================================================================

        @self.app.post("/progress")
        async def update_progress(request: Request):
            """Record progress for a session: {sessionId, current, total, status}."""
            body = await self._read_json(request)
            if not isinstance(body, dict):
                return _error(400, "Invalid request body")

            try:
                update = ProgressUpdateInput.model_validate(body)
            except PydanticValidationError:
                return _error(400, "Invalid request body")

            if not update.session_id:
                return _error(400, "Session ID is required")

            try:
                self.progress_store.set_progress(
                    update.session_id, update.current, update.total, update.status
                )
            except ValidationError as e:
                self.logger.warning("Progress update rejected", error=e.message)
                return _error(400, e.message)

            return JSONResponse(content={"success": True})

        @self.app.get("/progress")
        async def get_progress(session_id: Optional[str] = Query(None, alias="sessionId")):
            """Progress for a session; unknown sessions report idle."""
            if not session_id:
                return _error(400, "Session ID is required")
            return JSONResponse(content=self.progress_store.get_progress(session_id).model_dump())

        # ====================================================================
        # DISCOVERY
        # ====================================================================

        @self.app.get("/check-api-keys")
        async def check_api_keys():
            """Report which provider credentials are configured."""
            api_keys = Config.get_api_key_status()
            self.logger.info("API keys check", **api_keys)
            return JSONResponse(content={"apiKeys": api_keys})

        @self.app.get("/models")
        async def list_models(provider: Optional[str] = None):
            """Models per provider, or for a single provider."""
            if provider is None:
                return JSONResponse(
                    content={
                        "providers": {
                            name: {
                                "defaultModel": self.model_registry.default_model_for(name),
                                "models": [
                                    m.to_dict()
                                    for m in self.model_registry.models_for_provider(name)
                                ],
                            }
                            for name in self.model_registry.providers()
                        }
                    }
                )

            if provider not in self.model_registry.providers():
                return _error(400, "Invalid AI provider")

            return JSONResponse(
                content={
                    "provider": provider,
                    "defaultModel": self.model_registry.default_model_for(provider),
                    "models": [m.to_dict() for m in self.model_registry.models_for_provider(provider)],
                }
            )

        @self.app.get("/languages")
        async def list_languages():
            """Supported target languages and their file extensions."""
            return JSONResponse(
                content={
                    "languages": [
                        {"id": lang.id, "name": lang.name, "extension": lang.extension}
                        for lang in SUPPORTED_LANGUAGES
                    ]
                }
            )

        # ====================================================================
        # CLIENT LOGS
        # ====================================================================

        @self.app.post("/logs")
        async def ingest_client_logs(request: Request):
            """Log browser-side entries through the server logger."""
            body = await self._read_json(request)
            if not isinstance(body, dict) or not isinstance(body.get("logs"), list):
                return _error(400, "Invalid logs format")

            try:
                payload = ClientLogsInput.model_validate(body)
            except PydanticValidationError:
                return _error(400, "Invalid logs format")

            accepted = 0
            for entry in payload.logs:
                level = entry.level.lower()
                if level not in CLIENT_LOG_LEVELS:
                    continue
                fields = {"source": entry.source, "client_side": True}
                if entry.meta:
                    fields["meta"] = entry.meta
                log = self.logger.warning if level == "warn" else getattr(self.logger, level)
                log(f"[CLIENT] {entry.message}", **fields)
                accepted += 1

            return JSONResponse(content={"success": True, "accepted": accepted})
