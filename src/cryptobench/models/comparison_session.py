"""A completed single-run comparison kept in the result history."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from cryptobench.models.test_result import TestResult


def _utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


class ComparisonSession(BaseModel):
    """Results of running each algorithm once against the same input."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=_utc_now)
    data_length: int
    results: tuple[TestResult, ...]

    def result_for(self, algorithm: str) -> TestResult | None:
        """Return the result for an algorithm label, if present."""
        for result in self.results:
            if result.algorithm == algorithm:
                return result
        return None
