"""Mutable bookkeeping for one batch run."""

from __future__ import annotations

from dataclasses import dataclass, field

from cryptobench.core.statistics_aggregator import finalize, update_running
from cryptobench.models.batch import BatchResults, PairedResult, RealTimeComparison
from cryptobench.models.test_result import TestResult


@dataclass
class BatchSession:
    """State of a batch run, owned by the orchestrator while it runs.

    ``pairs_a``/``pairs_b`` hold only iterations where both legs succeeded
    and are kept in lock-step. ``paired_results`` holds every iteration whose
    two legs ran, including partial failures.
    """

    requested_tests: int
    data_size: int
    algorithm_a: str
    algorithm_b: str
    exclude_key_gen: bool = False
    attempted_tests: int = 0
    completed_tests: int = 0
    was_stopped_early: bool = False
    paired_results: list[PairedResult] = field(default_factory=list)
    pairs_a: list[TestResult] = field(default_factory=list)
    pairs_b: list[TestResult] = field(default_factory=list)

    def begin_iteration(self) -> int:
        """Count a started iteration and return its 1-based test number."""
        self.attempted_tests += 1
        return self.attempted_tests

    def record_pair(
        self,
        test_number: int,
        data_length: int,
        result_a: TestResult,
        result_b: TestResult,
    ) -> PairedResult:
        """Record an iteration whose two legs both ran."""
        pair = PairedResult(
            test_number=test_number,
            data_length=data_length,
            result_a=result_a,
            result_b=result_b,
        )
        self.completed_tests += 1
        self.paired_results.append(pair)
        if pair.both_succeeded:
            self.pairs_a.append(result_a)
            self.pairs_b.append(result_b)
        return pair

    def mark_stopped(self) -> None:
        self.was_stopped_early = True

    @property
    def successful_tests(self) -> int:
        return len(self.pairs_a)

    def running_comparison(self) -> RealTimeComparison | None:
        return update_running(self.pairs_a, self.pairs_b)

    def to_results(self) -> BatchResults:
        """Freeze the session into its final summary."""
        return finalize(
            self.pairs_a,
            self.pairs_b,
            self.requested_tests,
            self.data_size,
            self.was_stopped_early,
            self.exclude_key_gen,
            algorithm_a=self.algorithm_a,
            algorithm_b=self.algorithm_b,
            attempted_tests=self.attempted_tests,
            completed_tests=self.completed_tests,
            paired_results=self.paired_results,
        )
