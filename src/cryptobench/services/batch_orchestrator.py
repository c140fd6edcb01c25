"""Drives repeated paired tests with progress reporting and cooperative cancellation."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

import structlog

from cryptobench.core.batch_session import BatchSession
from cryptobench.errors import InvalidBatchSizeError, InvalidDataSizeError
from cryptobench.models.batch import BatchProgress, BatchResults
from cryptobench.models.config import MAX_BATCH_SIZE, MAX_DATA_SIZE, MIN_DATA_SIZE
from cryptobench.models.test_result import TimingPolicy
from cryptobench.services.test_runner import SingleTestRunner
from cryptobench.services.text_source import LocalTextSource
from cryptobench.utils.cancellation import CancellationToken
from cryptobench.utils.progress import ProgressTracker

if TYPE_CHECKING:
    from cryptobench.models.config import Config
    from cryptobench.services.protocols import TextSourceProtocol
    from cryptobench.services.targets import BenchmarkTarget

logger = structlog.get_logger(__name__)

MIN_BATCH_SIZE = 1

ProgressCallback = Callable[[BatchProgress], Awaitable[None] | None]


class BatchOrchestrator:
    """Runs a batch of paired tests, first target A then target B each iteration.

    Cancellation is observed before each iteration and between the two legs
    of a pair; an in-flight provider call is never interrupted.
    """

    def __init__(
        self,
        runner: SingleTestRunner | None = None,
        text_source: TextSourceProtocol | None = None,
        leg_delay_seconds: float = 0.5,
        iteration_delay_seconds: float = 0.2,
    ) -> None:
        self.runner = runner or SingleTestRunner()
        self.text_source = text_source or LocalTextSource()
        self.leg_delay_seconds = leg_delay_seconds
        self.iteration_delay_seconds = iteration_delay_seconds

    @classmethod
    def from_config(
        cls,
        config: Config,
        text_source: TextSourceProtocol | None = None,
    ) -> BatchOrchestrator:
        return cls(
            text_source=text_source,
            leg_delay_seconds=config.leg_delay_seconds,
            iteration_delay_seconds=config.iteration_delay_seconds,
        )

    @staticmethod
    def validate_batch_size(requested_count: int) -> None:
        if not MIN_BATCH_SIZE <= requested_count <= MAX_BATCH_SIZE:
            raise InvalidBatchSizeError(requested_count, MIN_BATCH_SIZE, MAX_BATCH_SIZE)

    @staticmethod
    def validate_data_size(data_size: int) -> None:
        if not MIN_DATA_SIZE <= data_size <= MAX_DATA_SIZE:
            raise InvalidDataSizeError(data_size, MIN_DATA_SIZE, MAX_DATA_SIZE)

    async def run_batch(
        self,
        requested_count: int,
        data_size: int,
        target_a: BenchmarkTarget,
        target_b: BenchmarkTarget,
        timing_policy: TimingPolicy | None = None,
        on_progress: ProgressCallback | None = None,
        cancellation_token: CancellationToken | None = None,
    ) -> BatchResults:
        """Run up to ``requested_count`` paired iterations and summarise them.

        Raises:
            InvalidBatchSizeError: before any provider call, if the count is
                outside 1..200.
            InvalidDataSizeError: before any provider call, if the payload
                length is outside 1..100000.
        """
        self.validate_batch_size(requested_count)
        self.validate_data_size(data_size)
        policy = timing_policy or TimingPolicy()
        token = cancellation_token or CancellationToken()

        session = BatchSession(
            requested_tests=requested_count,
            data_size=data_size,
            algorithm_a=target_a.algorithm,
            algorithm_b=target_b.algorithm,
            exclude_key_gen=policy.exclude_key_gen,
        )
        tracker = ProgressTracker(total=requested_count)
        logger.info(
            "batch_started",
            requested=requested_count,
            data_size=data_size,
            algorithm_a=target_a.algorithm,
            algorithm_b=target_b.algorithm,
            exclude_key_gen=policy.exclude_key_gen,
        )

        for _ in range(requested_count):
            if token.is_cancelled:
                session.mark_stopped()
                break

            test_number = session.begin_iteration()
            input_data = await self.text_source.generate(data_size)

            result_a = await self.runner.run_target(target_a, input_data, policy)

            if token.is_cancelled:
                session.mark_stopped()
                break

            await asyncio.sleep(self.leg_delay_seconds)
            result_b = await self.runner.run_target(target_b, input_data, policy)

            pair = session.record_pair(test_number, len(input_data), result_a, result_b)
            running = session.running_comparison() if pair.both_succeeded else None
            tracker.record_pair(pair)
            tracker.log_progress()

            await self._emit(
                on_progress,
                BatchProgress(
                    completed=session.completed_tests,
                    requested=requested_count,
                    latest_pair=pair,
                    running_comparison=running,
                ),
            )

            await asyncio.sleep(self.iteration_delay_seconds)

        if session.was_stopped_early:
            logger.info(
                "batch_cancelled",
                completed=session.completed_tests,
                requested=requested_count,
            )

        results = session.to_results()
        logger.info(
            "batch_completed",
            requested=results.requested_tests,
            stopped_early=results.was_stopped_early,
            trend=results.trend,
            **tracker.summary(),
        )
        return results

    @staticmethod
    async def _emit(callback: ProgressCallback | None, event: BatchProgress) -> None:
        if callback is None:
            return
        outcome = callback(event)
        if inspect.isawaitable(outcome):
            await outcome
