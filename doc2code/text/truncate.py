"""Truncate documentation so it fits a model's token budget."""

from doc2code.exceptions import InvalidTokenLimitError
from doc2code.text.tokens import CHARS_PER_TOKEN, estimate_tokens

DEFAULT_RESERVE_TOKENS = 1000

TRUNCATION_NOTICE = (
    "\n\n[NOTE: This documentation has been truncated due to token limits. "
    "Please consider splitting your documentation into smaller chunks for complete processing.]"
)


def truncate_to_limit(text: str, max_tokens: int, reserve_tokens: int = DEFAULT_RESERVE_TOKENS) -> str:
    """
    Truncate ``text`` to fit ``max_tokens`` minus ``reserve_tokens``.

    The reserve covers the system prompt and other per-request overhead. When
    truncation happens a fixed notice is appended, so the result may exceed
    the budget by the notice's own size.

    Raises:
        InvalidTokenLimitError: If ``max_tokens - reserve_tokens <= 0``
    """
    available_tokens = max_tokens - reserve_tokens
    if available_tokens <= 0:
        raise InvalidTokenLimitError(max_tokens, reserve_tokens)

    if estimate_tokens(text) <= available_tokens:
        return text

    return text[: available_tokens * CHARS_PER_TOKEN] + TRUNCATION_NOTICE
