"""URL and payload validation utilities."""

from __future__ import annotations

from urllib.parse import urlparse


def is_valid_url(url: str) -> bool:
    """Check if a string is a valid HTTP/HTTPS URL."""
    try:
        parsed = urlparse(url)
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)
    except ValueError:
        return False


def utf8_size(text: str) -> int:
    """Size of a text payload in bytes once UTF-8 encoded."""
    return len(text.encode("utf-8"))
