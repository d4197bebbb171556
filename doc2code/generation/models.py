"""Request and result types for SDK generation."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GenerationRequest:
    """A validated-at-orchestration request to turn documentation into an SDK."""

    documentation: str
    language: str
    provider: str
    model: Optional[str] = None
    minify: bool = False
    use_chunking: bool = False
    session_id: Optional[str] = None


@dataclass
class GenerationResult:
    sdk: str
    provider: str
    model: str
    chunk_count: int
    session_id: Optional[str] = None
