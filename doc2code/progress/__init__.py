"""Progress tracking package."""

from doc2code.progress.models import ProgressState, ProgressStatus
from doc2code.progress.store import InMemoryProgressStore, ProgressStore

__all__ = ["ProgressState", "ProgressStatus", "ProgressStore", "InMemoryProgressStore"]
