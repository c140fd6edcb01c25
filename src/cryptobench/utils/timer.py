"""Monotonic high-resolution clock used for phase timings."""

from __future__ import annotations

import time


class Timer:
    """Supplies monotonic timestamps in milliseconds."""

    def now(self) -> float:
        return time.perf_counter() * 1000.0

    def elapsed_since(self, start: float) -> float:
        """Milliseconds since ``start``, never negative."""
        return max(0.0, self.now() - start)
