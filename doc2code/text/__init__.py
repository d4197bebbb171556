"""Token estimation, minification, chunking and truncation of documentation text."""

from doc2code.text.chunking import split_into_chunks
from doc2code.text.minify import looks_like_json, minify
from doc2code.text.tokens import CHARS_PER_TOKEN, estimate_tokens
from doc2code.text.truncate import TRUNCATION_NOTICE, truncate_to_limit

__all__ = [
    "CHARS_PER_TOKEN",
    "TRUNCATION_NOTICE",
    "estimate_tokens",
    "looks_like_json",
    "minify",
    "split_into_chunks",
    "truncate_to_limit",
]
