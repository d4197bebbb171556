"""Progress tracking for multi-chunk generation sessions.

A store is created per server instance and injected into the orchestrator and
the web layer. State is volatile: it lives for the lifetime of the store and
entries are never evicted.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Union

from doc2code.exceptions import ProgressValidationError
from doc2code.logger import Logger, session_logger
from doc2code.progress.models import ProgressState, ProgressStatus


class ProgressStore(ABC):
    """Mapping from session id to progress state."""

    @abstractmethod
    def set_progress(
        self,
        session_id: str,
        current: int,
        total: int,
        status: Union[ProgressStatus, str] = ProgressStatus.PROCESSING,
    ) -> ProgressState:
        """Record progress for a session and return the stored state."""

    @abstractmethod
    def get_progress(self, session_id: str) -> ProgressState:
        """Return progress for a session, ``{0, 0, "idle"}`` when unknown."""

    @staticmethod
    def build_state(
        session_id: str, current: int, total: int, status: Union[ProgressStatus, str]
    ) -> ProgressState:
        """
        Validate a progress update.

        Raises:
            ProgressValidationError: If the session id is empty, the status is
                unknown, or ``0 <= current <= total`` does not hold
        """
        if not session_id:
            raise ProgressValidationError("Session ID is required")
        try:
            status = ProgressStatus(status)
        except ValueError:
            raise ProgressValidationError(
                f"Unknown progress status '{status}'", session_id
            ) from None
        if current < 0 or total < 0:
            raise ProgressValidationError(
                f"Progress values must not be negative (current={current}, total={total})",
                session_id,
            )
        if current > total:
            raise ProgressValidationError(
                f"Progress current ({current}) exceeds total ({total})", session_id
            )
        return ProgressState(current=current, total=total, status=status)


class InMemoryProgressStore(ProgressStore):
    """Process-local progress store backed by a dict."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger or session_logger
        self._sessions: Dict[str, ProgressState] = {}

    def set_progress(
        self,
        session_id: str,
        current: int,
        total: int,
        status: Union[ProgressStatus, str] = ProgressStatus.PROCESSING,
    ) -> ProgressState:
        state = self.build_state(session_id, current, total, status)
        self._sessions[session_id] = state
        self.logger.info(
            f"Progress updated for session {session_id}",
            current=state.current,
            total=state.total,
            status=state.status,
        )
        return state

    def get_progress(self, session_id: str) -> ProgressState:
        return self._sessions.get(session_id) or ProgressState()
