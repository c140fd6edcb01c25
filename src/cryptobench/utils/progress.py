"""Running tallies for a batch of paired tests, reported through structlog."""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cryptobench.utils.logger import get_logger

if TYPE_CHECKING:
    from cryptobench.models.batch import PairedResult

logger = get_logger(__name__)

# Failure bucket for a leg that ran cleanly but returned the wrong plaintext.
VERIFICATION = "verification"


@dataclass
class ProgressTracker:
    """Count completed pairs and attribute failed legs.

    A pair is successful only when both legs succeeded. Each failed leg is
    tallied by algorithm and by error kind, so a batch where one provider
    keeps timing out is visible in the logs without reading every result.
    """

    total: int
    completed: int = 0
    successful: int = 0
    failures_by_algorithm: Counter[str] = field(default_factory=Counter)
    failures_by_kind: Counter[str] = field(default_factory=Counter)
    start_time: float = field(default_factory=time.monotonic)

    def record_pair(self, pair: PairedResult) -> None:
        self.completed += 1
        if pair.both_succeeded:
            self.successful += 1
            return
        for result in (pair.result_a, pair.result_b):
            if not result.success:
                self.failures_by_algorithm[result.algorithm] += 1
                self.failures_by_kind[result.error_kind or VERIFICATION] += 1

    @property
    def failed(self) -> int:
        return self.completed - self.successful

    @property
    def progress_percentage(self) -> float:
        if self.total == 0:
            return 100.0
        return (self.completed / self.total) * 100.0

    def log_progress(self, every_n: int = 10) -> None:
        """Log every N pairs and on the last one."""
        if self.completed % every_n == 0 or self.completed == self.total:
            logger.info(
                "batch_progress",
                completed=self.completed,
                total=self.total,
                successful=self.successful,
                failed=self.failed,
                percentage=f"{self.progress_percentage:.1f}%",
            )

    def summary(self) -> dict[str, Any]:
        return {
            "completed": self.completed,
            "successful": self.successful,
            "failed": self.failed,
            "failures_by_algorithm": dict(self.failures_by_algorithm),
            "failures_by_kind": dict(self.failures_by_kind),
            "duration_seconds": round(time.monotonic() - self.start_time, 2),
        }
