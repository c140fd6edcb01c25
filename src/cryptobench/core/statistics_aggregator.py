"""Running and final statistics over paired round-trip results.

Every function here is pure: the same sequence of pairs always yields the
same snapshot, so a run interrupted at any point can still be summarised.
"""

from __future__ import annotations

from collections.abc import Sequence
from statistics import fmean

from cryptobench.models.batch import (
    BatchResults,
    PairedResult,
    PercentageDifferences,
    PhaseAverages,
    RealTimeComparison,
)
from cryptobench.models.test_result import TestResult

TIED = "Tied"


def percent_difference(avg_a: float, avg_b: float) -> float:
    """``(A - B) / A * 100``; positive means B is faster. Zero when A is zero."""
    if avg_a == 0:
        return 0.0
    return (avg_a - avg_b) / avg_a * 100.0


def count_wins(pairs_a: Sequence[TestResult], pairs_b: Sequence[TestResult]) -> tuple[int, int]:
    """Index-wise head-to-head wins on total time. Ties favour neither side."""
    wins_a = sum(1 for a, b in zip(pairs_a, pairs_b, strict=True) if a.total_time < b.total_time)
    wins_b = sum(1 for a, b in zip(pairs_a, pairs_b, strict=True) if b.total_time < a.total_time)
    return wins_a, wins_b


def determine_trend(total_difference: float, algorithm_a: str, algorithm_b: str) -> str:
    """Label naming the side currently ahead on total time."""
    if total_difference > 0:
        return f"{algorithm_b} Leading"
    if total_difference < 0:
        return f"{algorithm_a} Leading"
    return TIED


def phase_averages(results: Sequence[TestResult], include_key_gen: bool = False) -> PhaseAverages:
    """Mean timings for one side. ``results`` must not be empty."""
    return PhaseAverages(
        total=fmean(r.total_time for r in results),
        encrypt=fmean(r.encrypt_time for r in results),
        decrypt=fmean(r.decrypt_time for r in results),
        key_gen=fmean(r.key_gen_time for r in results) if include_key_gen else None,
    )


def percentage_differences(avg_a: PhaseAverages, avg_b: PhaseAverages) -> PercentageDifferences:
    key_gen = None
    if avg_a.key_gen is not None and avg_b.key_gen is not None:
        key_gen = percent_difference(avg_a.key_gen, avg_b.key_gen)
    return PercentageDifferences(
        total=percent_difference(avg_a.total, avg_b.total),
        encrypt=percent_difference(avg_a.encrypt, avg_b.encrypt),
        decrypt=percent_difference(avg_a.decrypt, avg_b.decrypt),
        key_gen=key_gen,
    )


def _check_lock_step(pairs_a: Sequence[TestResult], pairs_b: Sequence[TestResult]) -> None:
    if len(pairs_a) != len(pairs_b):
        msg = f"paired sequences differ in length: {len(pairs_a)} != {len(pairs_b)}"
        raise ValueError(msg)


def update_running(
    pairs_a: Sequence[TestResult],
    pairs_b: Sequence[TestResult],
) -> RealTimeComparison | None:
    """Snapshot of the successful pairs so far, or None if there are none."""
    _check_lock_step(pairs_a, pairs_b)
    if not pairs_a:
        return None

    averages_a = phase_averages(pairs_a)
    averages_b = phase_averages(pairs_b)
    differences = percentage_differences(averages_a, averages_b)
    wins_a, wins_b = count_wins(pairs_a, pairs_b)
    algorithm_a = pairs_a[0].algorithm
    algorithm_b = pairs_b[0].algorithm

    return RealTimeComparison(
        algorithm_a=algorithm_a,
        algorithm_b=algorithm_b,
        completed_tests=len(pairs_a),
        wins_a=wins_a,
        wins_b=wins_b,
        averages_a=averages_a,
        averages_b=averages_b,
        percentage_differences=differences,
        trend=determine_trend(differences.total, algorithm_a, algorithm_b),
    )


def finalize(
    pairs_a: Sequence[TestResult],
    pairs_b: Sequence[TestResult],
    requested_count: int,
    data_size: int,
    was_stopped_early: bool,
    exclude_key_gen: bool,
    *,
    algorithm_a: str = "A",
    algorithm_b: str = "B",
    attempted_tests: int | None = None,
    completed_tests: int | None = None,
    paired_results: Sequence[PairedResult] = (),
) -> BatchResults:
    """Package the final batch summary.

    Labels come from the results when any exist, otherwise from
    ``algorithm_a``/``algorithm_b``. Attempt and completion counts default to
    the number of successful pairs when the caller does not track them.
    """
    _check_lock_step(pairs_a, pairs_b)
    successful = len(pairs_a)
    if pairs_a:
        algorithm_a = pairs_a[0].algorithm
        algorithm_b = pairs_b[0].algorithm

    common = {
        "algorithm_a": algorithm_a,
        "algorithm_b": algorithm_b,
        "requested_tests": requested_count,
        "attempted_tests": successful if attempted_tests is None else attempted_tests,
        "completed_tests": successful if completed_tests is None else completed_tests,
        "successful_tests": successful,
        "data_size": data_size,
        "was_stopped_early": was_stopped_early,
        "excluded_key_gen": exclude_key_gen,
        "paired_results": tuple(paired_results),
    }
    if not pairs_a:
        return BatchResults(**common)

    averages_a = phase_averages(pairs_a, include_key_gen=True)
    averages_b = phase_averages(pairs_b, include_key_gen=True)
    differences = percentage_differences(averages_a, averages_b)
    wins_a, wins_b = count_wins(pairs_a, pairs_b)

    return BatchResults(
        **common,
        wins_a=wins_a,
        wins_b=wins_b,
        averages_a=averages_a,
        averages_b=averages_b,
        percentage_differences=differences,
        trend=determine_trend(differences.total, algorithm_a, algorithm_b),
    )
