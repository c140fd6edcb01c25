"""One-off comparisons of two algorithms on the same input."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from cryptobench.models.comparison_session import ComparisonSession
from cryptobench.models.test_result import TestResult, TimingPolicy
from cryptobench.services.result_history import ResultHistory
from cryptobench.services.test_runner import SingleTestRunner

if TYPE_CHECKING:
    from cryptobench.services.targets import BenchmarkTarget

logger = structlog.get_logger(__name__)


def _require_input(input_data: str) -> None:
    if not input_data.strip():
        msg = "input_data must not be empty; generate or enter test data first"
        raise ValueError(msg)


class ComparisonRunner:
    """Runs single tests and recorded side-by-side comparisons."""

    def __init__(
        self,
        runner: SingleTestRunner | None = None,
        history: ResultHistory | None = None,
        delay_seconds: float = 1.0,
    ) -> None:
        self.runner = runner or SingleTestRunner()
        self.history = history if history is not None else ResultHistory()
        self.delay_seconds = delay_seconds

    async def run_single(
        self,
        target: BenchmarkTarget,
        input_data: str,
        timing_policy: TimingPolicy | None = None,
    ) -> TestResult:
        """Test one algorithm; the result is not recorded in history."""
        _require_input(input_data)
        return await self.runner.run_target(target, input_data, timing_policy or TimingPolicy())

    async def run_comparison(
        self,
        target_a: BenchmarkTarget,
        target_b: BenchmarkTarget,
        input_data: str,
        timing_policy: TimingPolicy | None = None,
    ) -> ComparisonSession:
        """Test A then B on the same input and record the session."""
        _require_input(input_data)
        policy = timing_policy or TimingPolicy()

        result_a = await self.runner.run_target(target_a, input_data, policy)
        await asyncio.sleep(self.delay_seconds)
        result_b = await self.runner.run_target(target_b, input_data, policy)

        session = ComparisonSession(data_length=len(input_data), results=(result_a, result_b))
        self.history.record(session)
        logger.info(
            "comparison_completed",
            data_length=session.data_length,
            results={r.algorithm: r.success for r in session.results},
        )
        return session
