"""Groq provider (OpenAI SDK compatible endpoint)."""

from doc2code.providers.base_provider import BaseProvider


class GroqProvider(BaseProvider):
    """Groq-hosted open models."""

    provider_id = "groq"
    display_name = "Groq"
    api_key_env = "GROQ_API_KEY"
    base_url = "https://api.groq.com/openai/v1"
