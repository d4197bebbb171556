"""OpenAI provider."""

from doc2code.providers.base_provider import BaseProvider


class OpenAIProvider(BaseProvider):
    """OpenAI chat completions (GPT-4 family)."""

    provider_id = "openai"
    display_name = "OpenAI"
    api_key_env = "OPENAI_API_KEY"
    base_url = None
