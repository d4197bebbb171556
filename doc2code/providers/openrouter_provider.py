"""OpenRouter provider.

OpenRouter is OpenAI SDK compatible and attributes traffic to the calling app
through the ``HTTP-Referer`` and ``X-Title`` headers.
"""

from typing import Dict

from doc2code.config import Config
from doc2code.providers.base_provider import BaseProvider

APP_TITLE = "doc2code"


class OpenRouterProvider(BaseProvider):
    """OpenRouter gateway to Anthropic, Meta, Google and other models."""

    provider_id = "openrouter"
    display_name = "OpenRouter"
    api_key_env = "OPENROUTER_API_KEY"
    base_url = "https://openrouter.ai/api/v1"

    def default_headers(self) -> Dict[str, str]:
        return {"HTTP-Referer": Config.get_app_url(), "X-Title": APP_TITLE}
