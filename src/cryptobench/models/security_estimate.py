"""Security estimate model for an algorithm and key size."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SecurityEstimate(BaseModel):
    """Approximate symmetric-equivalent strength of a key size."""

    model_config = ConfigDict(frozen=True)

    algorithm: str
    key_size: int
    security_bits: int | None = None
    estimated_break_time: str | None = None
