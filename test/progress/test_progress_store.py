"""Tests for the in-memory progress store."""

import pytest

from doc2code.exceptions import ProgressValidationError
from doc2code.progress import InMemoryProgressStore, ProgressState, ProgressStatus


@pytest.fixture
def store():
    return InMemoryProgressStore()


class TestInMemoryProgressStore:
    """Tests for InMemoryProgressStore."""

    def test_unknown_session_is_idle(self, store):
        state = store.get_progress("missing")
        assert state.model_dump() == {"current": 0, "total": 0, "status": "idle"}

    def test_set_and_get(self, store):
        store.set_progress("s1", 2, 5)
        assert store.get_progress("s1") == ProgressState(current=2, total=5, status="processing")

    def test_last_write_wins(self, store):
        store.set_progress("s1", 1, 3, ProgressStatus.PROCESSING)
        store.set_progress("s1", 3, 3, ProgressStatus.COMPLETE)

        state = store.get_progress("s1")
        assert (state.current, state.total, state.status) == (3, 3, "complete")

    def test_sessions_are_independent(self, store):
        store.set_progress("a", 1, 2)
        store.set_progress("b", 0, 4, "initializing")

        assert store.get_progress("a").current == 1
        assert store.get_progress("b").status == "initializing"

    def test_status_accepts_plain_strings(self, store):
        assert store.set_progress("s1", 0, 0, "idle").status == "idle"

    @pytest.mark.parametrize(
        "current,total",
        [(4, 3), (-1, 3), (0, -1)],
    )
    def test_invalid_counts_rejected(self, store, current, total):
        with pytest.raises(ProgressValidationError):
            store.set_progress("s1", current, total)
        assert store.get_progress("s1").status == "idle"

    def test_unknown_status_rejected(self, store):
        with pytest.raises(ProgressValidationError) as exc_info:
            store.set_progress("s1", 0, 1, "paused")
        assert "paused" in exc_info.value.message

    def test_empty_session_id_rejected(self, store):
        with pytest.raises(ProgressValidationError) as exc_info:
            store.set_progress("", 0, 1)
        assert exc_info.value.message == "Session ID is required"
