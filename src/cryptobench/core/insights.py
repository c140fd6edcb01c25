"""Flags for results that run against expected performance characteristics."""

from __future__ import annotations

from cryptobench.models.batch import BatchResults


def performance_insights(results: BatchResults) -> list[str]:
    """Warnings when B is slower than A on encryption or key generation.

    B is conventionally the elliptic-curve side, which is expected to win
    both phases; a loss usually points at the provider implementation.
    """
    differences = results.percentage_differences
    if differences is None:
        return []

    insights: list[str] = []
    a, b = results.algorithm_a, results.algorithm_b
    if differences.encrypt < 0:
        insights.append(
            f"Unexpected: {b} encryption is {abs(differences.encrypt):.1f}% slower than {a}"
        )
    if (
        not results.excluded_key_gen
        and differences.key_gen is not None
        and differences.key_gen < 0
    ):
        insights.append(
            f"Unexpected: {b} key generation is {abs(differences.key_gen):.1f}% slower than {a}"
        )
    return insights
