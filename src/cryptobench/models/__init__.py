"""Pydantic data models for the crypto benchmark engine."""

from cryptobench.models.batch import (
    BatchProgress,
    BatchResults,
    PairedResult,
    PercentageDifferences,
    PhaseAverages,
    RealTimeComparison,
)
from cryptobench.models.comparison_session import ComparisonSession
from cryptobench.models.config import Config
from cryptobench.models.security_estimate import SecurityEstimate
from cryptobench.models.test_result import TestResult, TimingPolicy

__all__ = [
    "BatchProgress",
    "BatchResults",
    "ComparisonSession",
    "Config",
    "PairedResult",
    "PercentageDifferences",
    "PhaseAverages",
    "RealTimeComparison",
    "SecurityEstimate",
    "TestResult",
    "TimingPolicy",
]
