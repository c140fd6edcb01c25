"""Contract tests for SingleTestRunner against scripted fake providers.

A fake clock advances only inside provider calls, so every timing below is exact.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from structlog.testing import capture_logs

from cryptobench.errors import TransportError
from cryptobench.models.test_result import TimingPolicy
from cryptobench.services.test_runner import SingleTestRunner

INCLUDE = TimingPolicy(exclude_key_gen=False)
EXCLUDE = TimingPolicy(exclude_key_gen=True)
PAYLOAD = "Hello, round trip!"


class TestSuccessfulRoundTrip:
    @pytest.mark.asyncio
    async def test_result_fields(self, runner: SingleTestRunner, rsa_provider: Any) -> None:
        result = await runner.run_test("RSA", rsa_provider, PAYLOAD, 2048, INCLUDE)
        assert result.success is True
        assert result.decrypted_data == PAYLOAD
        assert result.session_id == "RSA-1"
        assert result.key_size == 2048
        assert result.error is None
        assert result.error_kind is None
        assert rsa_provider.calls == ["generate_key_pair", "encrypt", "decrypt"]

    @pytest.mark.asyncio
    async def test_phase_timings(self, runner: SingleTestRunner, rsa_provider: Any) -> None:
        result = await runner.run_test("RSA", rsa_provider, PAYLOAD, 2048, INCLUDE)
        assert result.key_gen_time == pytest.approx(300.0)
        assert result.encrypt_time == pytest.approx(40.0)
        assert result.decrypt_time == pytest.approx(60.0)
        assert result.total_time == pytest.approx(400.0)
        assert result.excluded_key_gen is False

    @pytest.mark.asyncio
    async def test_excluding_key_gen(self, runner: SingleTestRunner, rsa_provider: Any) -> None:
        result = await runner.run_test("RSA", rsa_provider, PAYLOAD, 2048, EXCLUDE)
        assert result.key_gen_time == pytest.approx(300.0)
        assert result.total_time == pytest.approx(100.0)
        assert result.total_time >= max(result.encrypt_time, result.decrypt_time)
        assert result.excluded_key_gen is True

    @pytest.mark.asyncio
    async def test_slow_key_gen_only_counts_when_included(
        self, runner: SingleTestRunner, make_provider: Any
    ) -> None:
        slow = make_provider("SLOW", keygen_ms=500.0, encrypt_ms=5.0, decrypt_ms=5.0)
        excluded = await runner.run_test("RSA", slow, PAYLOAD, 2048, EXCLUDE)
        included = await runner.run_test("RSA", slow, PAYLOAD, 2048, INCLUDE)
        assert excluded.total_time == pytest.approx(10.0)
        assert included.total_time == pytest.approx(510.0)

    @pytest.mark.asyncio
    async def test_alternate_field_names(self, runner: SingleTestRunner, make_provider: Any) -> None:
        provider = make_provider("ECC")
        provider.session_response = {"id": 42}
        provider.encrypt_response = {"data": "b64cipher"}
        provider.decrypt_response = {"text": PAYLOAD}
        result = await runner.run_test("ECC", provider, PAYLOAD, 256, INCLUDE)
        assert result.success is True
        assert result.session_id == "42"
        assert result.encrypted_data == "b64cipher"

    @pytest.mark.asyncio
    async def test_real_timer_non_negative(self, make_provider: Any) -> None:
        result = await SingleTestRunner().run_test("ECC", make_provider("ECC"), PAYLOAD, 256, EXCLUDE)
        assert result.success is True
        assert result.total_time >= 0.0


class TestProtocolAndProviderFailures:
    @pytest.mark.asyncio
    async def test_missing_session(self, runner: SingleTestRunner, make_provider: Any) -> None:
        provider = make_provider("RSA", keygen_ms=250.0)
        provider.session_response = {"success": True}
        result = await runner.run_test("RSA", provider, PAYLOAD, 2048, INCLUDE)
        assert result.success is False
        assert result.error == "No session ID received from key generation"
        assert result.error_kind == "protocol"
        assert result.total_time == pytest.approx(250.0)
        assert provider.calls == ["generate_key_pair"]

    @pytest.mark.asyncio
    async def test_missing_session_excluded_timing(
        self, runner: SingleTestRunner, make_provider: Any
    ) -> None:
        provider = make_provider("RSA", keygen_ms=250.0)
        provider.session_response = {}
        result = await runner.run_test("RSA", provider, PAYLOAD, 2048, EXCLUDE)
        assert result.key_gen_time == pytest.approx(250.0)
        assert result.total_time == 0.0

    @pytest.mark.asyncio
    async def test_key_generation_reported_failure(
        self, runner: SingleTestRunner, rsa_provider: Any
    ) -> None:
        rsa_provider.fail_keygen_on = {1}
        result = await runner.run_test("RSA", rsa_provider, PAYLOAD, 1000, INCLUDE)
        assert result.error == "Key generation failed: key size unsupported"
        assert result.error_kind == "provider"

    @pytest.mark.asyncio
    async def test_encryption_reported_failure(
        self, runner: SingleTestRunner, rsa_provider: Any
    ) -> None:
        rsa_provider.encrypt_response = {"success": False, "error": "Data too large for RSA"}
        result = await runner.run_test("RSA", rsa_provider, PAYLOAD, 2048, INCLUDE)
        assert result.success is False
        assert result.error == "Encryption failed: Data too large for RSA"
        assert result.error_kind == "provider"
        assert result.encrypt_time == pytest.approx(40.0)
        assert "decrypt" not in rsa_provider.calls

    @pytest.mark.asyncio
    async def test_missing_ciphertext(self, runner: SingleTestRunner, ecc_provider: Any) -> None:
        ecc_provider.encrypt_response = {"success": True, "encryptedData": None}
        result = await runner.run_test("ECC", ecc_provider, PAYLOAD, 256, INCLUDE)
        assert result.error == "No encrypted data received from encryption step"
        assert result.error_kind == "protocol"

    @pytest.mark.asyncio
    async def test_missing_plaintext(self, runner: SingleTestRunner, ecc_provider: Any) -> None:
        ecc_provider.decrypt_response = {"success": True}
        result = await runner.run_test("ECC", ecc_provider, PAYLOAD, 256, INCLUDE)
        assert result.error == "No decrypted data received from decryption step"
        assert result.error_kind == "protocol"

    @pytest.mark.asyncio
    async def test_decryption_reported_failure(
        self, runner: SingleTestRunner, ecc_provider: Any
    ) -> None:
        ecc_provider.decrypt_response = {"success": False, "error": "No ECC key pair found"}
        result = await runner.run_test("ECC", ecc_provider, PAYLOAD, 256, INCLUDE)
        assert result.error == "Decryption failed: No ECC key pair found"


class TestVerificationFailure:
    @pytest.mark.asyncio
    async def test_mismatch_is_silent(self, runner: SingleTestRunner, ecc_provider: Any) -> None:
        ecc_provider.corrupt_plaintext = True
        result = await runner.run_test("ECC", ecc_provider, PAYLOAD, 256, INCLUDE)
        assert result.success is False
        assert result.error is None
        assert result.error_kind is None
        assert result.verification_failed is True
        assert result.decrypted_data == PAYLOAD + "!"


class TestTransportFailures:
    @pytest.mark.asyncio
    async def test_raised_error_becomes_result(
        self, runner: SingleTestRunner, rsa_provider: Any
    ) -> None:
        rsa_provider.raise_on["encrypt"] = ConnectionError("connection refused")
        result = await runner.run_test("RSA", rsa_provider, PAYLOAD, 2048, INCLUDE)
        assert result.success is False
        assert result.error == "connection refused"
        assert result.error_kind == "transport"
        assert result.session_id == "RSA-1"

    @pytest.mark.asyncio
    async def test_blank_message_uses_type_name(
        self, runner: SingleTestRunner, rsa_provider: Any
    ) -> None:
        rsa_provider.raise_on["decrypt"] = TimeoutError()
        result = await runner.run_test("RSA", rsa_provider, PAYLOAD, 2048, INCLUDE)
        assert result.error == "TimeoutError"

    @pytest.mark.asyncio
    async def test_transport_error_kind(self, runner: SingleTestRunner, rsa_provider: Any) -> None:
        rsa_provider.raise_on["generate_key_pair"] = TransportError("502 Bad Gateway")
        result = await runner.run_test("RSA", rsa_provider, PAYLOAD, 2048, EXCLUDE)
        assert result.error == "502 Bad Gateway"
        assert result.error_kind == "transport"
        assert result.total_time >= 0.0

    @pytest.mark.asyncio
    async def test_cancellation_propagates(
        self, runner: SingleTestRunner, rsa_provider: Any
    ) -> None:
        rsa_provider.raise_on["encrypt"] = asyncio.CancelledError()
        with pytest.raises(asyncio.CancelledError):
            await runner.run_test("RSA", rsa_provider, PAYLOAD, 2048, INCLUDE)


class TestPayloadWarning:
    @pytest.mark.asyncio
    async def test_oversized_rsa_payload_warns_but_runs(
        self, runner: SingleTestRunner, rsa_provider: Any
    ) -> None:
        with capture_logs() as logs:
            result = await runner.run_test("RSA", rsa_provider, "x" * 245, 2048, INCLUDE)
        assert result.success is True
        events = [entry for entry in logs if entry["event"] == "payload_exceeds_rsa_limit"]
        assert len(events) == 1
        assert events[0]["payload_bytes"] == 245

    @pytest.mark.asyncio
    async def test_hybrid_not_warned(self, runner: SingleTestRunner, rsa_provider: Any) -> None:
        with capture_logs() as logs:
            await runner.run_test("RSA+AES", rsa_provider, "x" * 500, 2048, INCLUDE)
        assert not [entry for entry in logs if entry["event"] == "payload_exceeds_rsa_limit"]
