"""Random test payload generation with a local fallback."""

from __future__ import annotations

import asyncio
import random
from typing import TYPE_CHECKING

import requests
import structlog

from cryptobench.errors import TransportError
from cryptobench.utils.retry import retry_with_logging

if TYPE_CHECKING:
    from cryptobench.services.protocols import TextSourceProtocol

logger = structlog.get_logger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789 .,!?;:"


class LocalTextSource:
    """Uniform sampling over a fixed printable alphabet."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def generate_sync(self, length: int) -> str:
        if length < 0:
            msg = "length must be non-negative"
            raise ValueError(msg)
        return "".join(self._random.choices(ALPHABET, k=length))

    async def generate(self, length: int) -> str:
        return self.generate_sync(length)


class HttpTextSource:
    """Text generator exposed by the benchmark backend."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        max_attempts: int = 3,
        session: requests.Session | None = None,
    ) -> None:
        self.url = f"{base_url.rstrip('/')}/crypto/generate/text"
        self.timeout = timeout
        self.session = session or requests.Session()
        self._post = retry_with_logging(max_attempts=max_attempts)(self._post_once)

    def _post_once(self, length: int) -> str:
        response = self.session.post(self.url, json={"length": length}, timeout=self.timeout)
        response.raise_for_status()
        text = response.json().get("text")
        return text if isinstance(text, str) else ""

    async def generate(self, length: int) -> str:
        try:
            return await asyncio.to_thread(self._post, length)
        except (requests.RequestException, ValueError) as exc:
            raise TransportError(f"Text generation failed: {exc}") from exc


class FallbackTextSource:
    """Use a primary source, falling back to local sampling on failure."""

    def __init__(
        self,
        primary: TextSourceProtocol,
        fallback: LocalTextSource | None = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback or LocalTextSource()

    async def generate(self, length: int) -> str:
        try:
            text = await self.primary.generate(length)
        except Exception as exc:
            logger.warning("text_source_fallback", reason=str(exc), length=length)
            return await self.fallback.generate(length)
        if not text:
            logger.warning("text_source_fallback", reason="empty text", length=length)
            return await self.fallback.generate(length)
        return text
