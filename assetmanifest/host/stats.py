"""Stats-file loading — reads a build engine's JSON report into a BuildOutput."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from assetmanifest.core.collector import CollectionError
from assetmanifest.models.assets import BuildOutput

logger = logging.getLogger(__name__)


def load_build_output(path: Path | str) -> BuildOutput:
    """Load and validate a build stats JSON file.

    Raises
    ------
    CollectionError
        If the file cannot be read, is not JSON, or does not describe a build.
    """
    stats_path = Path(path)
    try:
        raw = stats_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CollectionError(f"Cannot read build stats {stats_path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CollectionError(f"Invalid JSON in {stats_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CollectionError(
            f"Build stats must be a JSON object, got {type(data).__name__}"
        )

    try:
        output = BuildOutput.model_validate(data)
    except ValidationError as exc:
        raise CollectionError(f"Malformed build stats {stats_path}: {exc}") from exc

    logger.debug("Loaded build %s from %s", output.build_id, stats_path)
    return output
