"""Benchmark core -- pure functions for statistics, limits and estimates."""

from __future__ import annotations

from cryptobench.core.batch_session import BatchSession
from cryptobench.core.formatting import (
    PerformanceMetrics,
    describe_difference,
    format_time,
    performance_metrics,
)
from cryptobench.core.insights import performance_insights
from cryptobench.core.payload_limits import (
    DATA_SIZE_PRESETS,
    DEFAULT_DATA_SIZE,
    max_data_size,
    should_use_hybrid,
)
from cryptobench.core.security_estimation import estimate_security, known_key_sizes
from cryptobench.core.statistics_aggregator import (
    count_wins,
    determine_trend,
    finalize,
    percent_difference,
    update_running,
)

__all__ = [
    # batch_session
    "BatchSession",
    # formatting
    "PerformanceMetrics",
    "describe_difference",
    "format_time",
    "performance_metrics",
    # insights
    "performance_insights",
    # payload_limits
    "DATA_SIZE_PRESETS",
    "DEFAULT_DATA_SIZE",
    "max_data_size",
    "should_use_hybrid",
    # security_estimation
    "estimate_security",
    "known_key_sizes",
    # statistics
    "count_wins",
    "determine_trend",
    "finalize",
    "percent_difference",
    "update_running",
]
