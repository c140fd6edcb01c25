"""Binding of an algorithm label to the provider and key size used to test it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cryptobench.models.config import Config
    from cryptobench.services.protocols import CryptoProviderProtocol


@dataclass(frozen=True)
class BenchmarkTarget:
    """An algorithm under test: label, provider and requested key size."""

    algorithm: str
    provider: CryptoProviderProtocol
    key_size: int


def build_http_targets(
    config: Config,
    use_hybrid: bool | None = None,
) -> tuple[BenchmarkTarget, BenchmarkTarget]:
    """Build the (first, second) targets against the configured HTTP backend.

    The first target is RSA, or the RSA+AES hybrid when requested; the
    second is always ECC.
    """
    from cryptobench.services.http_provider import HttpCryptoProvider

    hybrid = config.use_rsa_hybrid if use_hybrid is None else use_hybrid
    first_preset = "rsa-aes" if hybrid else "rsa"
    first = HttpCryptoProvider.from_preset(
        first_preset, config.api_base_url, timeout=config.api_timeout_seconds
    )
    second = HttpCryptoProvider.from_preset(
        "ecc", config.api_base_url, timeout=config.api_timeout_seconds
    )
    return (
        BenchmarkTarget(algorithm=first.algorithm, provider=first, key_size=config.rsa_key_size),
        BenchmarkTarget(algorithm=second.algorithm, provider=second, key_size=config.ecc_key_size),
    )
