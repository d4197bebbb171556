"""Text-processing exceptions."""

from doc2code.exceptions.base import ValidationError


class InvalidTokenLimitError(ValidationError):
    """Raised when a token budget leaves no room for content."""

    def __init__(self, max_tokens: int, reserve_tokens: int):
        super().__init__(
            code="INVALID_TOKEN_LIMIT",
            message=f"Invalid token limit: {max_tokens} with reserve of {reserve_tokens}",
            details={"max_tokens": max_tokens, "reserve_tokens": reserve_tokens},
        )
        self.max_tokens = max_tokens
        self.reserve_tokens = reserve_tokens


class InvalidChunkSizeError(ValidationError):
    """Raised when chunk size and overlap would prevent the splitter from advancing."""

    def __init__(self, max_tokens_per_chunk: int, overlap_tokens: int):
        super().__init__(
            code="INVALID_CHUNK_SIZE",
            message=(
                f"Chunk size of {max_tokens_per_chunk} tokens must be positive and larger "
                f"than the overlap of {overlap_tokens} tokens"
            ),
            details={
                "max_tokens_per_chunk": max_tokens_per_chunk,
                "overlap_tokens": overlap_tokens,
            },
        )
