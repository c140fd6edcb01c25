"""Shared test fixtures for the crypto benchmark engine."""

from __future__ import annotations

from typing import Any

import pytest

from cryptobench.models.config import Config
from cryptobench.services.batch_orchestrator import BatchOrchestrator
from cryptobench.services.targets import BenchmarkTarget
from cryptobench.services.test_runner import SingleTestRunner
from cryptobench.services.text_source import LocalTextSource
from cryptobench.utils.timer import Timer


class FakeClock(Timer):
    """Clock that only moves when told to."""

    def __init__(self) -> None:
        self.current = 1_000.0

    def now(self) -> float:
        return self.current

    def advance(self, milliseconds: float) -> None:
        self.current += milliseconds


class FakeProvider:
    """Scripted crypto provider that reverses text as its 'cipher'.

    Each operation advances the shared fake clock by a fixed cost and is
    recorded in ``calls`` (and in ``call_log`` when one is shared).
    """

    def __init__(
        self,
        name: str,
        clock: FakeClock,
        keygen_ms: float = 0.0,
        encrypt_ms: float = 0.0,
        decrypt_ms: float = 0.0,
        *,
        call_log: list[tuple[str, str]] | None = None,
    ) -> None:
        self.name = name
        self.clock = clock
        self.keygen_ms = keygen_ms
        self.encrypt_ms = encrypt_ms
        self.decrypt_ms = decrypt_ms
        self.call_log = call_log
        self.calls: list[str] = []
        self.keygen_count = 0
        self.session_response: dict[str, Any] | None = None
        self.encrypt_response: dict[str, Any] | None = None
        self.decrypt_response: dict[str, Any] | None = None
        self.raise_on: dict[str, Exception] = {}
        self.fail_keygen_on: set[int] = set()
        self.corrupt_plaintext = False
        self.on_encrypt: Any = None

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if self.call_log is not None:
            self.call_log.append((self.name, operation))
        if operation in self.raise_on:
            raise self.raise_on[operation]

    async def generate_key_pair(self, key_size: int) -> dict[str, Any]:
        self.keygen_count += 1
        self.clock.advance(self.keygen_ms)
        self._record("generate_key_pair")
        if self.keygen_count in self.fail_keygen_on:
            return {"success": False, "error": "key size unsupported"}
        if self.session_response is not None:
            return self.session_response
        return {"success": True, "sessionId": f"{self.name}-{self.keygen_count}"}

    async def encrypt(self, session_id: str, plaintext: str) -> dict[str, Any]:
        self.clock.advance(self.encrypt_ms)
        self._record("encrypt")
        if self.on_encrypt is not None:
            self.on_encrypt()
        if self.encrypt_response is not None:
            return self.encrypt_response
        return {"success": True, "encryptedData": plaintext[::-1]}

    async def decrypt(self, session_id: str, encrypted_data: Any) -> dict[str, Any]:
        self.clock.advance(self.decrypt_ms)
        self._record("decrypt")
        if self.decrypt_response is not None:
            return self.decrypt_response
        plaintext = str(encrypted_data)[::-1]
        if self.corrupt_plaintext:
            plaintext += "!"
        return {"success": True, "decryptedData": plaintext}


@pytest.fixture
def clock() -> FakeClock:
    """Provide a controllable clock."""
    return FakeClock()


@pytest.fixture
def runner(clock: FakeClock) -> SingleTestRunner:
    """Provide a runner timed by the fake clock."""
    return SingleTestRunner(timer=clock)


@pytest.fixture
def call_log() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def rsa_provider(clock: FakeClock, call_log: list[tuple[str, str]]) -> FakeProvider:
    """RSA-like provider: 100ms total per round trip, excluding key generation."""
    return FakeProvider("RSA", clock, keygen_ms=300.0, encrypt_ms=40.0, decrypt_ms=60.0, call_log=call_log)


@pytest.fixture
def ecc_provider(clock: FakeClock, call_log: list[tuple[str, str]]) -> FakeProvider:
    """ECC-like provider: 80ms total per round trip, excluding key generation."""
    return FakeProvider("ECC", clock, keygen_ms=20.0, encrypt_ms=30.0, decrypt_ms=50.0, call_log=call_log)


@pytest.fixture
def rsa_target(rsa_provider: FakeProvider) -> BenchmarkTarget:
    return BenchmarkTarget(algorithm="RSA", provider=rsa_provider, key_size=2048)


@pytest.fixture
def ecc_target(ecc_provider: FakeProvider) -> BenchmarkTarget:
    return BenchmarkTarget(algorithm="ECC", provider=ecc_provider, key_size=256)


@pytest.fixture
def orchestrator(runner: SingleTestRunner) -> BatchOrchestrator:
    """Orchestrator with no artificial delays and deterministic text."""
    return BatchOrchestrator(
        runner=runner,
        text_source=LocalTextSource(seed=7),
        leg_delay_seconds=0,
        iteration_delay_seconds=0,
    )


@pytest.fixture
def fast_config() -> Config:
    """Configuration with all pacing delays disabled."""
    return Config(
        leg_delay_seconds=0,
        iteration_delay_seconds=0,
        comparison_delay_seconds=0,
        log_level="WARNING",
    )


@pytest.fixture
def make_provider(clock: FakeClock, call_log: list[tuple[str, str]]) -> Any:
    """Factory for additional fake providers sharing the clock and call log."""

    def _make(
        name: str,
        keygen_ms: float = 0.0,
        encrypt_ms: float = 0.0,
        decrypt_ms: float = 0.0,
    ) -> FakeProvider:
        return FakeProvider(
            name,
            clock,
            keygen_ms=keygen_ms,
            encrypt_ms=encrypt_ms,
            decrypt_ms=decrypt_ms,
            call_log=call_log,
        )

    return _make
