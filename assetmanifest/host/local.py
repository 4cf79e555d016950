"""Local disk build — writes emitted artifacts to the filesystem.

Targets arrive already resolved against the build's output directory;
parent directories are created as needed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class LocalDiskBuild:
    """A build handle backed by a real output directory.

    Parameters
    ----------
    output_path:
        The build's output directory.  Defaults to the working directory.
    """

    def __init__(self, output_path: Path | str | None = None) -> None:
        self.output_path = Path(output_path) if output_path else Path(".")
        self.shared_state: dict[str, Any] = {}
        self.errors: list[Exception] = []
        self.written: list[Path] = []

    def emit_artifact(self, target: Path, text: str) -> None:
        """Write *text* to *target*, creating parent directories."""
        path = Path(target)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        self.written.append(path)
        logger.debug("LocalDiskBuild: wrote %s", path)

    def read_manifest(self, file_name: Path | str) -> Any:
        """Read and parse a JSON manifest, relative to ``output_path``."""
        path = Path(file_name)
        if not path.is_absolute():
            path = self.output_path / path
        return json.loads(path.read_text(encoding="utf-8"))
