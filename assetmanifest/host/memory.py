"""In-memory build — keeps emitted artifacts in a dict.

Layout: artifacts are keyed by the POSIX form of their target path, the
way an in-memory output filesystem would hold them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryBuild:
    """A build handle whose output filesystem lives in memory.

    Parameters
    ----------
    output_path:
        The build's output directory, used to address relative artifacts.
    """

    def __init__(self, output_path: Path | str = "") -> None:
        self.output_path = Path(output_path)
        self.shared_state: dict[str, Any] = {}
        self.errors: list[Exception] = []
        self.artifacts: dict[str, str] = {}

    def emit_artifact(self, target: Path, text: str) -> None:
        """Store *text* under *target*, replacing any earlier content."""
        key = Path(target).as_posix()
        self.artifacts[key] = text
        logger.debug("InMemoryBuild: wrote %s (%d chars)", key, len(text))

    def read(self, target: Path | str) -> str:
        """Return the artifact at *target*, resolved against ``output_path``."""
        path = Path(target)
        if not path.is_absolute():
            path = self.output_path / path
        key = path.as_posix()
        if key not in self.artifacts:
            raise FileNotFoundError(f"Artifact not found: {key}")
        return self.artifacts[key]

    def __repr__(self) -> str:
        return (
            f"InMemoryBuild(output_path={self.output_path.as_posix()!r}, "
            f"artifacts={len(self.artifacts)})"
        )
