"""Batch-level result models: paired results, running and final statistics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field

from cryptobench.models.test_result import TestResult


class PairedResult(BaseModel):
    """One paired iteration: both algorithms run on the same input."""

    model_config = ConfigDict(frozen=True)

    test_number: int
    data_length: int
    result_a: TestResult
    result_b: TestResult

    @computed_field  # type: ignore[prop-decorator]
    @property
    def both_succeeded(self) -> bool:
        return self.result_a.success and self.result_b.success


class PhaseAverages(BaseModel):
    """Mean phase timings (ms) for one algorithm."""

    model_config = ConfigDict(frozen=True)

    total: float
    encrypt: float
    decrypt: float
    key_gen: float | None = None


class PercentageDifferences(BaseModel):
    """Per-phase ``(A - B) / A * 100``; positive means B is faster."""

    model_config = ConfigDict(frozen=True)

    total: float
    encrypt: float
    decrypt: float
    key_gen: float | None = None


class RealTimeComparison(BaseModel):
    """Running snapshot derived from the successful pairs seen so far."""

    model_config = ConfigDict(frozen=True)

    algorithm_a: str
    algorithm_b: str
    completed_tests: int
    wins_a: int
    wins_b: int
    averages_a: PhaseAverages
    averages_b: PhaseAverages
    percentage_differences: PercentageDifferences
    trend: str


class BatchResults(BaseModel):
    """Final immutable summary of a batch run.

    When no pair fully succeeded the averages, differentials and trend are
    ``None`` rather than zero.
    """

    model_config = ConfigDict(frozen=True)

    algorithm_a: str
    algorithm_b: str
    requested_tests: int
    attempted_tests: int
    completed_tests: int
    successful_tests: int
    data_size: int
    was_stopped_early: bool
    excluded_key_gen: bool
    wins_a: int = 0
    wins_b: int = 0
    averages_a: PhaseAverages | None = None
    averages_b: PhaseAverages | None = None
    percentage_differences: PercentageDifferences | None = None
    trend: str | None = None
    paired_results: tuple[PairedResult, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_data(self) -> bool:
        return self.successful_tests > 0


class BatchProgress(BaseModel):
    """Progress event emitted once per finished iteration."""

    model_config = ConfigDict(frozen=True)

    completed: int
    requested: int
    latest_pair: PairedResult | None = None
    running_comparison: RealTimeComparison | None = None

    @property
    def percent(self) -> float:
        if self.requested == 0:
            return 100.0
        return self.completed / self.requested * 100.0
