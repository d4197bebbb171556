"""Split long documentation into overlapping chunks that fit a token budget."""

from typing import List

from doc2code.exceptions import InvalidChunkSizeError
from doc2code.text.tokens import CHARS_PER_TOKEN, estimate_tokens

# How far past a window boundary to look for a natural break
BREAK_LOOKAHEAD_CHARS = 100

DEFAULT_MAX_TOKENS_PER_CHUNK = 4000
DEFAULT_OVERLAP_TOKENS = 200


def _find_break(text: str, end: int) -> int:
    """Move ``end`` just past a paragraph or sentence break within the lookahead."""
    window = text[end : end + BREAK_LOOKAHEAD_CHARS]

    paragraph_break = window.find("\n\n")
    if paragraph_break != -1:
        return end + paragraph_break + 2

    sentence_break = window.find(". ")
    if sentence_break != -1:
        return end + sentence_break + 1

    return end


def split_into_chunks(
    text: str,
    max_tokens_per_chunk: int = DEFAULT_MAX_TOKENS_PER_CHUNK,
    overlap_tokens: int = DEFAULT_OVERLAP_TOKENS,
) -> List[str]:
    """
    Split ``text`` into ordered chunks of roughly ``max_tokens_per_chunk`` tokens.

    Each chunk after the first starts ``overlap_tokens * 4`` characters before
    the end of its predecessor, so dropping that prefix from every chunk but
    the first and concatenating reproduces ``text`` exactly.

    Args:
        text: Text to split
        max_tokens_per_chunk: Target size of each chunk in estimated tokens
        overlap_tokens: Tokens repeated at the start of each following chunk

    Returns:
        List of chunks; ``[]`` for empty text, ``[text]`` if it already fits

    Raises:
        InvalidChunkSizeError: If the chunk size is not positive, the overlap is
            negative, or the overlap is not smaller than the chunk size
    """
    if max_tokens_per_chunk <= 0 or overlap_tokens < 0 or overlap_tokens >= max_tokens_per_chunk:
        raise InvalidChunkSizeError(max_tokens_per_chunk, overlap_tokens)

    if not text:
        return []

    if estimate_tokens(text) <= max_tokens_per_chunk:
        return [text]

    chars_per_chunk = max_tokens_per_chunk * CHARS_PER_TOKEN
    overlap_chars = overlap_tokens * CHARS_PER_TOKEN
    length = len(text)

    chunks: List[str] = []
    start = 0
    while True:
        end = start + chars_per_chunk
        if end >= length:
            end = length
        else:
            end = _find_break(text, end)

        chunks.append(text[start:end])

        if end >= length:
            break
        # end - start >= chars_per_chunk > overlap_chars, so start always advances
        start = end - overlap_chars

    return chunks
