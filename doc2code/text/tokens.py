"""Approximate token counting.

Providers tokenize differently; a fixed ratio of four characters per token is
close enough for English prose and code to budget prompts.
"""

import math

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Estimate the number of tokens in ``text`` as ``ceil(len(text) / 4)``."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)
