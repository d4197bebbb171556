"""Lossy minification of documentation text.

Strips comments and redundant whitespace to reduce the token footprint before
the text is sent to a provider. The generic path treats every ``//`` as the
start of a comment, so prose containing URLs loses the rest of the line.
"""

import json
import re

from doc2code.logger import Logger, session_logger

_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
_WHITESPACE = re.compile(r"\s+")
_PUNCTUATION_PADDING = re.compile(r"\s*([.,;:()\[\]{}])\s*")


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


def looks_like_json(text: str) -> bool:
    """Return True when ``text`` starts like a JSON object or array."""
    stripped = text.lstrip()
    return stripped.startswith("{") or stripped.startswith("[")


def minify(text: str, is_json: bool = False, logger: Logger = session_logger) -> str:
    """
    Minify ``text`` by removing comments and unnecessary whitespace.

    Args:
        text: Text to minify
        is_json: Try a strict JSON round-trip first; falls back to the generic
            path when the text does not parse
        logger: Logger used to report the JSON fallback

    Returns:
        The minified text (empty input is returned unchanged)
    """
    if not text:
        return text

    if is_json:
        try:
            parsed = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            logger.warning(
                "Failed to parse as JSON, falling back to regular minification",
                error=str(e),
            )
        else:
            return json.dumps(parsed, separators=(",", ":"), ensure_ascii=False)

    text = _LINE_COMMENT.sub("", text)
    text = _BLOCK_COMMENT.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    text = _PUNCTUATION_PADDING.sub(r"\1", text)
    return text.strip()
