"""Security strength estimates for supported key sizes."""

from __future__ import annotations

from cryptobench.models.security_estimate import SecurityEstimate

_ESTIMATES: dict[str, dict[int, tuple[int, str]]] = {
    "RSA": {
        1024: (80, "Days to weeks on specialized hardware"),
        2048: (112, "Years with current technology"),
        3072: (128, "Decades with current technology"),
        4096: (152, "Beyond foreseeable future"),
    },
    "ECC": {
        256: (128, "Decades with current technology"),
        384: (192, "Beyond foreseeable future"),
        521: (256, "Beyond foreseeable quantum computing threats"),
    },
}

# Hybrid strength is bounded by the key-wrapping primitive.
_ALIASES = {"RSA+AES": "RSA"}


def estimate_security(algorithm: str, key_size: int) -> SecurityEstimate:
    """Estimate security bits and break time; unknown pairs yield no estimate."""
    family = _ALIASES.get(algorithm.upper(), algorithm.upper())
    entry = _ESTIMATES.get(family, {}).get(key_size)
    if entry is None:
        return SecurityEstimate(algorithm=algorithm, key_size=key_size)
    bits, break_time = entry
    return SecurityEstimate(
        algorithm=algorithm,
        key_size=key_size,
        security_bits=bits,
        estimated_break_time=break_time,
    )


def known_key_sizes(algorithm: str) -> list[int]:
    family = _ALIASES.get(algorithm.upper(), algorithm.upper())
    return sorted(_ESTIMATES.get(family, {}))
