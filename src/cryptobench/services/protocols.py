"""Service protocols defining interfaces for dependency injection."""

from __future__ import annotations

from typing import Any, Protocol


class CryptoProviderProtocol(Protocol):
    """Remote cryptographic back-end for one algorithm.

    Responses are mappings. Key generation yields ``sessionId``, encryption
    yields ``encryptedData`` (plus optional ``success``/``error``), decryption
    yields ``decryptedData``.
    """

    async def generate_key_pair(self, key_size: int) -> dict[str, Any]: ...

    async def encrypt(self, session_id: str, plaintext: str) -> dict[str, Any]: ...

    async def decrypt(self, session_id: str, encrypted_data: Any) -> dict[str, Any]: ...


class TextSourceProtocol(Protocol):
    """Supplier of random test payloads."""

    async def generate(self, length: int) -> str: ...
