"""Manifest emitter — serializes the manifest value and hands it to the build.

The emitter does two things for every build pass:

1. writes the serialized text as a build artifact at ``file_name``;
2. publishes the in-memory value into the build's shared state so other
   build steps can read it without parsing the artifact.

Emitting again for the same pass replaces the artifact entirely.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from assetmanifest.config import settings
from assetmanifest.core.hasher import content_address
from assetmanifest.host import BuildHandle
from assetmanifest.models.artifacts import ManifestArtifact
from assetmanifest.models.config import PipelineConfig

logger = logging.getLogger(__name__)


class SerializationError(RuntimeError):
    """Raised when the serializer fails or returns something other than text."""

    def __init__(self, message: str, *, build_id: str = "") -> None:
        super().__init__(message)
        self.stage = "serialize"
        self.build_id = build_id


class WriteError(RuntimeError):
    """Raised when the manifest artifact cannot be written."""

    def __init__(self, message: str, *, target_path: str = "", build_id: str = "") -> None:
        super().__init__(message)
        self.stage = "write"
        self.target_path = target_path
        self.build_id = build_id


def default_serialize(value: Any) -> str:
    """Pretty-printed JSON, indented per ``settings.indent``."""
    return json.dumps(value, indent=settings.indent)


def resolve_target(file_name: str, output_path: str | Path) -> Path:
    """Resolve *file_name* against the output directory unless it is absolute."""
    target = Path(file_name)
    if target.is_absolute():
        return target
    return Path(output_path) / target


class Emitter:
    """Writes and publishes manifest values.

    Parameters
    ----------
    config:
        The pipeline configuration.  Uses defaults if not provided.
    """

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()

    def serialize(self, value: Any, build_id: str = "") -> str:
        """Serialize *value* with the configured serializer."""
        serializer: Callable[[Any], Any] = self.config.serialize or default_serialize
        try:
            text = serializer(value)
        except Exception as exc:
            logger.error("Manifest serialization failed for build %s: %s", build_id or "-", exc)
            raise SerializationError(
                f"Manifest serialization failed for build {build_id or '-'}: {exc}",
                build_id=build_id,
            ) from exc

        if not isinstance(text, str):
            raise SerializationError(
                f"Serializer must return str, got {type(text).__name__}",
                build_id=build_id,
            )
        return text

    def emit(
        self,
        value: Any,
        *,
        build: BuildHandle,
        output_path: str | Path = "",
        build_id: str = "",
    ) -> ManifestArtifact:
        """Serialize, write and publish *value*; return the artifact record."""
        text = self.serialize(value, build_id)
        target = resolve_target(self.config.file_name, output_path)

        try:
            build.emit_artifact(target, text)
            if self.config.write_to_disk:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write manifest %s: %s", target, exc)
            raise WriteError(
                f"Failed to write manifest {target}: {exc}",
                target_path=target.as_posix(),
                build_id=build_id,
            ) from exc

        build.shared_state[self.config.shared_state_key] = value

        artifact = ManifestArtifact(
            file_name=self.config.file_name,
            target_path=target.as_posix(),
            text=text,
            content_address=content_address(text),
            size_bytes=len(text.encode("utf-8")),
            build_id=build_id,
        )
        logger.info(
            "Emitted manifest %s (%d bytes, %s)",
            artifact.target_path,
            artifact.size_bytes,
            artifact.content_address[:19],
        )
        return artifact
