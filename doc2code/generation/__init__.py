"""SDK generation orchestration."""

from doc2code.generation.models import GenerationRequest, GenerationResult
from doc2code.generation.orchestrator import GenerationOrchestrator

__all__ = ["GenerationOrchestrator", "GenerationRequest", "GenerationResult"]
