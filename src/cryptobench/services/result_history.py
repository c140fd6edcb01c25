"""Bounded history of recent comparison sessions."""

from __future__ import annotations

from collections import deque

from cryptobench.models.comparison_session import ComparisonSession

DEFAULT_HISTORY_SIZE = 5


class ResultHistory:
    """Ring buffer keeping the most recent sessions, newest first."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE) -> None:
        if capacity < 1:
            msg = "capacity must be at least 1"
            raise ValueError(msg)
        self.capacity = capacity
        self._sessions: deque[ComparisonSession] = deque(maxlen=capacity)

    def record(self, session: ComparisonSession) -> None:
        """Add a session, evicting the oldest when full."""
        self._sessions.appendleft(session)

    def latest(self) -> ComparisonSession | None:
        return self._sessions[0] if self._sessions else None

    def sessions(self) -> list[ComparisonSession]:
        return list(self._sessions)

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)
