"""Cooperative cancellation token for long-running batch operations."""

from __future__ import annotations

import threading


class CancellationToken:
    """Settable stop flag, safe to set from another thread or a signal handler.

    Setting the token has no immediate effect; the holder observes it at
    its own checkpoints.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request a stop at the next checkpoint."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()
