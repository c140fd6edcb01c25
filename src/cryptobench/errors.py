"""Exception taxonomy for benchmark runs.

Protocol, provider and transport errors are raised inside a single round-trip
test and converted into a failed ``TestResult`` by the runner. Only
``InvalidBatchSizeError`` and ``InvalidDataSizeError`` escape to callers, before
any test starts.
"""

from __future__ import annotations

from typing import ClassVar, Literal

ErrorKind = Literal["protocol", "provider", "transport"]


class CryptoBenchError(Exception):
    """Base class for errors raised while exercising a crypto provider."""

    kind: ClassVar[ErrorKind] = "transport"


class ProtocolError(CryptoBenchError):
    """A well-formed response is missing a required field."""

    kind: ClassVar[ErrorKind] = "protocol"


class MissingSessionError(ProtocolError):
    def __init__(self) -> None:
        super().__init__("No session ID received from key generation")


class MissingCiphertextError(ProtocolError):
    def __init__(self) -> None:
        super().__init__("No encrypted data received from encryption step")


class MissingPlaintextError(ProtocolError):
    def __init__(self) -> None:
        super().__init__("No decrypted data received from decryption step")


class ProviderError(CryptoBenchError):
    """The provider explicitly reported a failure."""

    kind: ClassVar[ErrorKind] = "provider"
    operation: ClassVar[str] = "Operation"

    def __init__(self, message: str | None) -> None:
        self.provider_message = message or "unknown error"
        super().__init__(f"{self.operation} failed: {self.provider_message}")


class KeyGenerationError(ProviderError):
    operation: ClassVar[str] = "Key generation"


class EncryptionError(ProviderError):
    operation: ClassVar[str] = "Encryption"


class DecryptionError(ProviderError):
    operation: ClassVar[str] = "Decryption"


class TransportError(CryptoBenchError):
    """The remote call itself failed (network, timeout, serialization)."""

    kind: ClassVar[ErrorKind] = "transport"


class InvalidBatchSizeError(ValueError):
    """Requested batch size is outside the permitted range."""

    def __init__(self, requested: int, minimum: int, maximum: int) -> None:
        self.requested = requested
        super().__init__(
            f"batch size must be between {minimum} and {maximum}, got {requested}"
        )


class InvalidDataSizeError(ValueError):
    """Requested payload length is outside the permitted range."""

    def __init__(self, requested: int, minimum: int, maximum: int) -> None:
        self.requested = requested
        super().__init__(
            f"data size must be between {minimum} and {maximum}, got {requested}"
        )
