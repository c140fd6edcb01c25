"""Plaintext size limits for direct (non-hybrid) public-key encryption."""

from __future__ import annotations

import math

# Conservative OAEP limits in bytes; theoretical maxima are somewhat higher.
RSA_LIMITS: dict[int, int] = {
    1024: 100,
    2048: 200,
    3072: 300,
    4096: 400,
}
DEFAULT_RSA_LIMIT = 200
ECC_LIMIT = 100

DATA_SIZE_PRESETS: dict[str, int] = {
    "Tiny": 50,
    "Small": 100,
    "Medium": 150,
    "Large": 175,
    "XL": 245,
    "XXL": 500,
}
DEFAULT_DATA_SIZE = DATA_SIZE_PRESETS["Medium"]


def max_data_size(algorithm: str, key_size: int) -> float:
    """Largest payload (bytes) the algorithm can encrypt directly."""
    label = algorithm.upper()
    if label == "RSA":
        return RSA_LIMITS.get(key_size, DEFAULT_RSA_LIMIT)
    if label == "ECC":
        return ECC_LIMIT
    return math.inf


def should_use_hybrid(algorithm: str, key_size: int, data_size: int) -> bool:
    """True when the payload exceeds the direct-encryption limit."""
    return data_size > max_data_size(algorithm, key_size)
