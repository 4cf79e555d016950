"""Emitted manifest artifact model."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class ManifestArtifact(BaseModel):
    """Record of one manifest emission.

    The content_address is the SHA-256 of the UTF-8 artifact text, so two
    emissions of an unchanged manifest carry the same address.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    target_path: str
    text: str
    content_address: str  # "sha256:<hex>"
    size_bytes: int
    build_id: str = ""
    emitted_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
