"""Content hashing helpers for emitted manifest artifacts."""

from __future__ import annotations

import hashlib


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def content_address(text: str) -> str:
    """Content-address artifact text.

    Returns "sha256:<hex>" of the UTF-8 encoded text.
    """
    return f"sha256:{sha256_hex(text.encode('utf-8'))}"
