"""Generation orchestrator.

Chooses a provider adapter, optionally minifies and chunks the documentation,
issues the provider calls in order and reports progress for chunked sessions.

Multi-chunk flow for N chunks::

    chunk 1      -> "build the initial SDK structure"      progress 1/(N+1)
    chunk 2..N   -> "add the endpoints from part i of N"   progress i/(N+1)
    combine call -> merge all partial SDKs                  progress N+1/(N+1), complete

Calls are strictly sequential; a failure anywhere aborts the request and the
partial outputs are discarded.
"""

from typing import List, Optional

from doc2code.config import Config
from doc2code.exceptions import (
    ConfigurationError,
    GenerationValidationError,
    UnknownProviderError,
)
from doc2code.generation.models import GenerationRequest, GenerationResult
from doc2code.logger import Logger, session_logger
from doc2code.models import ModelRegistry
from doc2code.progress import ProgressStatus, ProgressStore
from doc2code.prompts import PromptRenderer, default_renderer
from doc2code.providers import BaseProvider, ProviderRegistry
from doc2code.text import (
    TRUNCATION_NOTICE,
    estimate_tokens,
    looks_like_json,
    minify,
    split_into_chunks,
    truncate_to_limit,
)


class GenerationOrchestrator:
    """Runs single-call and multi-chunk SDK generation."""

    def __init__(
        self,
        provider_registry: ProviderRegistry,
        model_registry: ModelRegistry,
        progress_store: ProgressStore,
        logger: Logger = session_logger,
        renderer: Optional[PromptRenderer] = None,
        chunk_tokens: Optional[int] = None,
        overlap_tokens: Optional[int] = None,
        reserve_tokens: Optional[int] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            provider_registry: Adapters by provider id
            model_registry: Model catalogue for defaults and token limits
            progress_store: Store updated as chunked sessions advance
            logger: Logger instance
            renderer: Prompt renderer for chunk framing and combination prompts
            chunk_tokens: Target tokens per chunk (default from Config)
            overlap_tokens: Overlap between chunks (default from Config)
            reserve_tokens: Tokens reserved for prompt overhead (default from Config)
        """
        self.provider_registry = provider_registry
        self.model_registry = model_registry
        self.progress_store = progress_store
        self.logger = logger
        self.renderer = renderer or default_renderer
        self.chunk_tokens = chunk_tokens if chunk_tokens is not None else Config.get_chunk_tokens()
        self.overlap_tokens = (
            overlap_tokens if overlap_tokens is not None else Config.get_chunk_overlap_tokens()
        )
        self.reserve_tokens = (
            reserve_tokens if reserve_tokens is not None else Config.get_reserve_tokens()
        )

    def validate(self, request: GenerationRequest) -> BaseProvider:
        """
        Check required fields and resolve the provider adapter.

        Raises:
            GenerationValidationError: If documentation, language or provider is empty
            UnknownProviderError: If the provider is not registered
        """
        missing = [
            name
            for name, value in (
                ("documentation", request.documentation),
                ("language", request.language),
                ("aiProvider", request.provider),
            )
            if not value
        ]
        if missing:
            self.logger.warning("Missing required fields", missing=",".join(missing))
            raise GenerationValidationError(missing)

        if request.provider not in self.provider_registry:
            self.logger.warning(f"Invalid AI provider: {request.provider}")
            raise UnknownProviderError(
                request.provider, available=self.provider_registry.provider_ids()
            )
        return self.provider_registry.get(request.provider)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate an SDK for ``request``.

        Returns:
            GenerationResult with the final SDK text

        Raises:
            GenerationValidationError, UnknownProviderError: On invalid requests,
                before any provider call
            ProviderError: If any provider call fails
            ConfigurationError: If the reserved tokens leave no room for content
                in the model's budget, before any provider call
        """
        provider = self.validate(request)
        model = request.model or self.model_registry.default_model_for(request.provider)
        token_limit = self.model_registry.token_limit_for(request.provider, model)
        self._check_budget(request.provider, model, token_limit)

        documentation = request.documentation
        if request.minify:
            documentation = minify(
                documentation, is_json=looks_like_json(documentation), logger=self.logger
            )
            self.logger.info(
                "Documentation minified",
                original_length=len(request.documentation),
                minified_length=len(documentation),
            )

        self.logger.info(
            "Generating SDK",
            provider=request.provider,
            model=model,
            language=request.language,
            documentation_length=len(documentation),
            token_limit=token_limit,
            use_chunking=request.use_chunking,
        )

        chunks: List[str] = []
        if request.use_chunking:
            budget = self.chunk_budget(token_limit)
            chunks = split_into_chunks(documentation, budget, self.chunk_overlap(budget))
            self.logger.info("Documentation split", chunks=len(chunks))

        if len(chunks) > 1:
            sdk = await self._generate_chunked(
                provider, chunks, request.language, model, token_limit, request.session_id
            )
        else:
            sdk = await provider.generate(
                self._fit(documentation, token_limit), request.language, model
            )
            if request.session_id:
                self.progress_store.set_progress(
                    request.session_id, 1, 1, ProgressStatus.COMPLETE
                )

        self.logger.info(
            "SDK generated successfully",
            provider=request.provider,
            model=model,
            language=request.language,
            sdk_length=len(sdk),
        )
        return GenerationResult(
            sdk=sdk,
            provider=request.provider,
            model=model,
            chunk_count=max(len(chunks), 1),
            session_id=request.session_id,
        )

    def chunk_budget(self, token_limit: int) -> int:
        """Tokens per chunk: the configured size, capped by the model's budget."""
        return max(1, min(self.chunk_tokens, token_limit - self.reserve_tokens))

    def chunk_overlap(self, budget: int) -> int:
        """Configured overlap, kept below the chunk budget so the splitter advances."""
        return max(0, min(self.overlap_tokens, budget - 1))

    def _check_budget(self, provider: str, model: str, token_limit: int) -> None:
        if token_limit - self.reserve_tokens > 0:
            return
        self.logger.error(
            "Reserved tokens exceed model token limit",
            provider=provider,
            model=model,
            token_limit=token_limit,
            reserve_tokens=self.reserve_tokens,
        )
        raise ConfigurationError(
            f"Reserve of {self.reserve_tokens} tokens leaves no room in the "
            f"{token_limit}-token limit of {provider} model '{model}'",
            code="TOKEN_BUDGET_MISCONFIGURED",
            details={
                "provider": provider,
                "model": model,
                "token_limit": token_limit,
                "reserve_tokens": self.reserve_tokens,
            },
        )

    def _fit(self, text: str, token_limit: int) -> str:
        fitted = truncate_to_limit(text, token_limit, self.reserve_tokens)
        if fitted.endswith(TRUNCATION_NOTICE) and not text.endswith(TRUNCATION_NOTICE):
            self.logger.warning(
                "Prompt truncated to fit token limit",
                token_limit=token_limit,
                original_length=len(text),
                truncated_length=len(fitted),
            )
        return fitted

    def _fit_parts(
        self, partials: List[str], token_limit: int, session_id: Optional[str]
    ) -> List[str]:
        """
        Truncate each partial SDK to an equal share of the prompt budget.

        Every part keeps its head, so each "Part i of N" reaches the model. The
        reserve covers the combine framing around the parts.
        """
        share = (token_limit - self.reserve_tokens) // len(partials)
        share = max(1, share - estimate_tokens(TRUNCATION_NOTICE))
        fitted = [truncate_to_limit(part, share, reserve_tokens=0) for part in partials]
        cut = sum(1 for part, fit in zip(partials, fitted) if part != fit)
        if cut:
            self.logger.warning(
                "Partial SDKs truncated to fit combine prompt",
                session_id=session_id,
                parts=len(partials),
                truncated_parts=cut,
                tokens_per_part=share,
            )
        return fitted

    async def _generate_chunked(
        self,
        provider: BaseProvider,
        chunks: List[str],
        language: str,
        model: str,
        token_limit: int,
        session_id: Optional[str],
    ) -> str:
        total_chunks = len(chunks)
        total_steps = total_chunks + 1
        self._report(session_id, 0, total_steps, ProgressStatus.PROCESSING)

        partials: List[str] = []
        for index, chunk in enumerate(chunks):
            if index == 0:
                prompt = self.renderer.initial_chunk_prompt(chunk, total_chunks)
            else:
                prompt = self.renderer.followup_chunk_prompt(chunk, index + 1, total_chunks)

            self.logger.info(
                f"Processing chunk {index + 1} of {total_chunks}",
                session_id=session_id,
                chunk_length=len(chunk),
            )
            partials.append(await provider.generate(prompt, language, model))
            self._report(session_id, index + 1, total_steps, ProgressStatus.PROCESSING)

        self.logger.info("Combining partial SDKs", session_id=session_id, parts=len(partials))
        combine_prompt = self.renderer.combine_prompt(
            self._fit_parts(partials, token_limit, session_id), language
        )
        sdk = await provider.generate(combine_prompt, language, model)
        self._report(session_id, total_steps, total_steps, ProgressStatus.COMPLETE)
        return sdk

    def _report(
        self, session_id: Optional[str], current: int, total: int, status: ProgressStatus
    ) -> None:
        if session_id:
            self.progress_store.set_progress(session_id, current, total, status)
