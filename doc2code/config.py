"""Centralized configuration for the doc2code service.

All settings come from environment variables (``main_web`` loads a ``.env``
file first when one is present).

Providers
---------
OPENAI_API_KEY        OpenAI credential
OPENROUTER_API_KEY    OpenRouter credential
GROQ_API_KEY          Groq credential
NEXT_PUBLIC_APP_URL   Public URL of the app, sent to OpenRouter as HTTP-Referer
                      (default: http://localhost:3000)

Server
------
DOC2CODE_WEB_PORT     Web server port (default: 8000)
DOC2CODE_LOG_DIR      Directory for date-named log files (default: ./logs)
DOC2CODE_LOG_LEVEL    Logging verbosity (default: INFO)

Rate limiting
-------------
DOC2CODE_RATE_LIMIT_ENABLED         "true"/"false" (default: true)
DOC2CODE_RATE_LIMIT_REQUESTS        Requests per window per client (default: 10)
DOC2CODE_RATE_LIMIT_WINDOW_SECONDS  Window length (default: 3600)

Chunking
--------
DOC2CODE_CHUNK_TOKENS          Target tokens per chunk (default: 4000)
DOC2CODE_CHUNK_OVERLAP_TOKENS  Overlap between chunks (default: 200)
DOC2CODE_RESERVE_TOKENS        Tokens reserved for prompts and overhead (default: 1000)
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional

from doc2code.logger import session_logger

DEFAULT_WEB_PORT = 8000
DEFAULT_APP_URL = "http://localhost:3000"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_RATE_LIMIT_REQUESTS = 10
DEFAULT_RATE_LIMIT_WINDOW_SECONDS = 3600
DEFAULT_CHUNK_TOKENS = 4000
DEFAULT_CHUNK_OVERLAP_TOKENS = 200
DEFAULT_RESERVE_TOKENS = 1000

PROVIDER_API_KEY_ENV: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
    "groq": "GROQ_API_KEY",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    """Parse an integer environment variable, falling back to ``default``."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        session_logger.warning(
            "Invalid integer in environment", variable=name, provided_value=raw, default_value=default
        )
        return default
    if value < minimum:
        session_logger.warning(
            "Environment value below minimum",
            variable=name,
            provided_value=value,
            minimum=minimum,
            default_value=default,
        )
        return default
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    session_logger.warning(
        "Invalid boolean in environment", variable=name, provided_value=raw, default_value=default
    )
    return default


class Config:
    """Read-only accessors for environment-driven settings."""

    @classmethod
    def get_web_port(cls) -> int:
        return _int_env("DOC2CODE_WEB_PORT", DEFAULT_WEB_PORT, minimum=1)

    @classmethod
    def get_log_dir(cls) -> Path:
        log_dir = os.environ.get("DOC2CODE_LOG_DIR")
        if log_dir:
            return Path(log_dir)
        return Path.cwd() / "logs"

    @classmethod
    def get_log_level(cls) -> int:
        name = os.environ.get("DOC2CODE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def get_app_url(cls) -> str:
        return os.environ.get("NEXT_PUBLIC_APP_URL") or DEFAULT_APP_URL

    @classmethod
    def get_api_key(cls, provider: str) -> Optional[str]:
        """Return the credential for ``provider`` or None when unset or empty."""
        env_var = PROVIDER_API_KEY_ENV.get(provider)
        if env_var is None:
            return None
        return os.environ.get(env_var) or None

    @classmethod
    def get_api_key_status(cls) -> Dict[str, bool]:
        """Report which provider credentials are configured (never the values)."""
        return {provider: cls.get_api_key(provider) is not None for provider in PROVIDER_API_KEY_ENV}

    @classmethod
    def is_rate_limit_enabled(cls) -> bool:
        return _bool_env("DOC2CODE_RATE_LIMIT_ENABLED", True)

    @classmethod
    def get_rate_limit_requests(cls) -> int:
        return _int_env("DOC2CODE_RATE_LIMIT_REQUESTS", DEFAULT_RATE_LIMIT_REQUESTS, minimum=1)

    @classmethod
    def get_rate_limit_window_seconds(cls) -> int:
        return _int_env(
            "DOC2CODE_RATE_LIMIT_WINDOW_SECONDS", DEFAULT_RATE_LIMIT_WINDOW_SECONDS, minimum=1
        )

    @classmethod
    def get_chunk_tokens(cls) -> int:
        return _int_env("DOC2CODE_CHUNK_TOKENS", DEFAULT_CHUNK_TOKENS, minimum=1)

    @classmethod
    def get_chunk_overlap_tokens(cls) -> int:
        return _int_env("DOC2CODE_CHUNK_OVERLAP_TOKENS", DEFAULT_CHUNK_OVERLAP_TOKENS)

    @classmethod
    def get_reserve_tokens(cls) -> int:
        return _int_env("DOC2CODE_RESERVE_TOKENS", DEFAULT_RESERVE_TOKENS)

    @classmethod
    def get_config_summary(cls) -> dict:
        """Summary of the effective configuration, safe to log."""
        return {
            "web_port": cls.get_web_port(),
            "log_dir": str(cls.get_log_dir()),
            "app_url": cls.get_app_url(),
            "api_keys": cls.get_api_key_status(),
            "rate_limit_enabled": cls.is_rate_limit_enabled(),
            "rate_limit_requests": cls.get_rate_limit_requests(),
            "rate_limit_window_seconds": cls.get_rate_limit_window_seconds(),
            "chunk_tokens": cls.get_chunk_tokens(),
            "chunk_overlap_tokens": cls.get_chunk_overlap_tokens(),
            "reserve_tokens": cls.get_reserve_tokens(),
        }
