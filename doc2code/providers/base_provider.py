"""
Base provider interface for SDK generation.

Every supported provider exposes an OpenAI-compatible chat-completions API, so
the shared implementation lives here and subclasses only declare the endpoint,
the credential variable and any extra headers.
"""

from abc import ABC
from typing import Dict, List, Optional

from openai import APIError, APIStatusError, AsyncOpenAI

from doc2code.config import Config
from doc2code.exceptions import (
    EmptyCompletionError,
    ProviderConfigurationError,
    ProviderGenerationError,
)
from doc2code.logger import Logger, session_logger
from doc2code.prompts import PromptRenderer, default_renderer

DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_OUTPUT_TOKENS = 4000


class BaseProvider(ABC):
    """
    Abstract base class for LLM providers.

    Subclasses set the class attributes below; ``generate`` is shared.
    """

    provider_id: str = ""
    display_name: str = ""
    api_key_env: str = ""
    base_url: Optional[str] = None

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
        renderer: Optional[PromptRenderer] = None,
        logger: Logger = session_logger,
        temperature: float = DEFAULT_TEMPERATURE,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
    ):
        """
        Initialize provider.

        Args:
            api_key: API key (provider-specific env var is read at call time if None)
            client: Preconfigured OpenAI-compatible client (tests inject a mock)
            renderer: Prompt renderer
            logger: Logger instance
            temperature: Sampling temperature
            max_output_tokens: Maximum completion tokens per call
        """
        self._api_key = api_key
        self._client = client
        self._client_key: Optional[str] = None
        self.renderer = renderer or default_renderer
        self.logger = logger
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

    def is_configured(self) -> bool:
        """True when a credential is available for this provider."""
        return bool(self._api_key or Config.get_api_key(self.provider_id))

    def default_headers(self) -> Dict[str, str]:
        """Extra HTTP headers sent with every request."""
        return {}

    def _resolve_api_key(self) -> str:
        api_key = self._api_key or Config.get_api_key(self.provider_id)
        if not api_key:
            self.logger.error(f"{self.api_key_env} is not set", provider=self.provider_id)
            raise ProviderConfigurationError(self.display_name, self.api_key_env)
        return api_key

    def _get_client(self, api_key: str) -> AsyncOpenAI:
        if self._client is not None and (self._client_key is None or self._client_key == api_key):
            return self._client
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=self.base_url,
            default_headers=self.default_headers() or None,
        )
        self._client_key = api_key
        return self._client

    def build_messages(self, prompt_text: str, language: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.renderer.system_prompt(language)},
            {"role": "user", "content": self.renderer.user_prompt(prompt_text, language)},
        ]

    async def generate(self, prompt_text: str, language: str, model: str) -> str:
        """
        Generate SDK source code for ``language`` from ``prompt_text``.

        Args:
            prompt_text: Documentation (already minified/truncated/framed)
            language: Target language identifier
            model: Provider model identifier

        Returns:
            The content of the first completion choice

        Raises:
            ProviderConfigurationError: If the credential is missing (no request is made)
            ProviderGenerationError: On transport or HTTP errors
            EmptyCompletionError: If the provider returns no content
        """
        api_key = self._resolve_api_key()
        client = self._get_client(api_key)

        self.logger.info(
            f"Generating SDK with {self.display_name}",
            provider=self.provider_id,
            model=model,
            language=language,
            prompt_length=len(prompt_text),
        )

        try:
            response = await client.chat.completions.create(
                model=model,
                messages=self.build_messages(prompt_text, language),
                temperature=self.temperature,
                max_tokens=self.max_output_tokens,
            )
        except APIStatusError as e:
            self.logger.error(
                f"{self.display_name} request failed",
                provider=self.provider_id,
                model=model,
                status=e.status_code,
                error=e.message,
            )
            raise ProviderGenerationError(self.display_name, e.message, status_code=e.status_code) from e
        except APIError as e:
            self.logger.error(
                f"{self.display_name} request failed",
                provider=self.provider_id,
                model=model,
                error=e.message,
                error_type=type(e).__name__,
            )
            raise ProviderGenerationError(self.display_name, e.message) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            self.logger.warning(f"{self.display_name} returned empty content", model=model)
            raise EmptyCompletionError(self.display_name, model)

        self.logger.info(
            f"{self.display_name} SDK generation successful",
            provider=self.provider_id,
            model=model,
            language=language,
            sdk_length=len(content),
        )
        return content
