"""HTTP client for the remote crypto backend."""

from __future__ import annotations

import asyncio
from typing import Any, ClassVar

import requests
import structlog

from cryptobench.errors import TransportError

logger = structlog.get_logger(__name__)


def _error_message(exc: requests.RequestException) -> str:
    """Prefer the backend's JSON ``message`` over the transport message."""
    response = exc.response
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return str(exc)


class HttpCryptoProvider:
    """Crypto provider backed by ``{base_url}/crypto/{path}/...`` endpoints.

    Calls are not retried; each timing must reflect a single request.
    """

    PRESETS: ClassVar[dict[str, str]] = {
        "rsa": "RSA",
        "ecc": "ECC",
        "rsa-aes": "RSA+AES",
    }

    def __init__(
        self,
        base_url: str,
        path: str,
        algorithm: str | None = None,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.path = path.strip("/")
        self.algorithm = algorithm or self.path.upper()
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    @classmethod
    def from_preset(
        cls,
        preset: str,
        base_url: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> HttpCryptoProvider:
        if preset not in cls.PRESETS:
            msg = f"Unknown provider preset: {preset}"
            raise ValueError(msg)
        return cls(base_url, preset, cls.PRESETS[preset], timeout=timeout, session=session)

    def _post(self, operation: str, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/crypto/{self.path}/{operation}"
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            raise TransportError(_error_message(exc)) from exc
        except ValueError as exc:
            raise TransportError(f"Invalid JSON from {operation}: {exc}") from exc

        if not isinstance(body, dict):
            msg = f"Unexpected response type from {operation}: {type(body).__name__}"
            raise TransportError(msg)
        logger.debug("provider_call_completed", algorithm=self.algorithm, operation=operation)
        return body

    async def generate_key_pair(self, key_size: int) -> dict[str, Any]:
        return await asyncio.to_thread(self._post, "generateKeys", {"keySize": key_size})

    async def encrypt(self, session_id: str, plaintext: str) -> dict[str, Any]:
        return await asyncio.to_thread(
            self._post, "encrypt", {"sessionId": session_id, "data": plaintext}
        )

    async def decrypt(self, session_id: str, encrypted_data: Any) -> dict[str, Any]:
        return await asyncio.to_thread(
            self._post, "decrypt", {"sessionId": session_id, "encryptedData": encrypted_data}
        )


def check_backend_health(base_url: str, timeout: int = 10) -> bool:
    """Check if the crypto backend is reachable."""
    try:
        response = requests.post(
            f"{base_url.rstrip('/')}/crypto/generate/text",
            json={"length": 1},
            timeout=timeout,
        )
        return response.status_code == 200
    except requests.RequestException as exc:
        logger.warning("backend_health_check_failed", error=str(exc))
        return False
