"""Human-readable timing output."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def format_time(milliseconds: float) -> str:
    """Format a duration using μs, ms or s depending on magnitude."""
    if milliseconds < 1:
        return f"{milliseconds * 1000:.2f}μs"
    if milliseconds < 1000:
        return f"{milliseconds:.2f}ms"
    return f"{milliseconds / 1000:.2f}s"


def describe_difference(percent: float, algorithm_b: str) -> str:
    """Describe B relative to A, e.g. ``"ECC is 20.0% faster"``."""
    direction = "faster" if percent > 0 else "slower"
    return f"{algorithm_b} is {abs(percent):.1f}% {direction}"


@dataclass(frozen=True)
class PerformanceMetrics:
    """Aggregate of a series of timings (ms)."""

    total: float
    average: float
    minimum: float
    maximum: float

    def formatted(self) -> dict[str, str]:
        return {
            "total": format_time(self.total),
            "average": format_time(self.average),
            "min": format_time(self.minimum),
            "max": format_time(self.maximum),
        }


def performance_metrics(timings: Sequence[float]) -> PerformanceMetrics | None:
    """Summarise a list of timings; None for an empty list."""
    if not timings:
        return None
    total = sum(timings)
    return PerformanceMetrics(
        total=total,
        average=total / len(timings),
        minimum=min(timings),
        maximum=max(timings),
    )
