"""Manifest pipeline — filter, map, sort, generate.

The pipeline is a pure function of the accumulated state and the
configuration: every run starts from ``state.assets`` and a fresh copy of
the seed, so rerunning it on an unchanged state yields the same value.

Stage ordering is fixed::

    filter -> map -> sort -> generate

Any exception raised by a hook aborts the run with a
``PipelineStageError`` naming the failing stage.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, MutableMapping
from typing import Any

from assetmanifest.core.state import ManifestState
from assetmanifest.models.assets import OutputAsset
from assetmanifest.models.config import PipelineConfig

logger = logging.getLogger(__name__)


class PipelineStageError(RuntimeError):
    """Raised when a filter, map, sort or generate hook fails."""

    def __init__(
        self,
        message: str,
        *,
        stage: str,
        asset_count: int = 0,
        build_id: str = "",
    ) -> None:
        super().__init__(message)
        self.stage = stage
        self.asset_count = asset_count
        self.build_id = build_id


def default_generate(seed: Any, files: list[OutputAsset]) -> Any:
    """Reduce *files* into *seed* as ``seed[name] = path``.

    Entries already present with an identical path are left untouched;
    later files with a repeated name overwrite earlier ones.
    """
    if not isinstance(seed, MutableMapping):
        raise TypeError(
            f"default generator needs a mapping seed, got {type(seed).__name__}"
        )
    for file in files:
        if seed.get(file.name) == file.path:
            continue
        seed[file.name] = file.path
    return seed


def _accepts_index(hook: Callable[..., Any]) -> bool:
    """Whether a map hook takes the asset's position as a second argument."""
    try:
        parameters = inspect.signature(hook).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = 0
    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= 2


class Pipeline:
    """Runs the configured stages over a ``ManifestState``.

    Parameters
    ----------
    config:
        The pipeline configuration.  Uses defaults if not provided.
    """

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()

    def run(self, state: ManifestState, build_id: str = "") -> Any:
        """Produce the manifest value for the current state."""
        files = state.assets
        logger.info(
            "Running manifest pipeline for build %s over %d assets",
            build_id or "-",
            len(files),
        )

        files = self._run_stage("filter", self._filter, files, build_id)
        files = self._run_stage("map", self._map, files, build_id)
        files = self._run_stage("sort", self._sort, files, build_id)

        generate = self.config.generate or default_generate
        return self._run_stage(
            "generate",
            lambda items: generate(state.fresh_seed(), items),
            files,
            build_id,
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _filter(self, files: list[OutputAsset]) -> list[OutputAsset]:
        if self.config.filter is None:
            return files
        return [file for file in files if self.config.filter(file)]

    def _map(self, files: list[OutputAsset]) -> list[OutputAsset]:
        if self.config.map is None:
            return files
        if _accepts_index(self.config.map):
            return [self.config.map(file, index) for index, file in enumerate(files)]
        return [self.config.map(file) for file in files]

    def _sort(self, files: list[OutputAsset]) -> list[OutputAsset]:
        if self.config.sort is None:
            return files
        return sorted(files, key=functools.cmp_to_key(self.config.sort))

    @staticmethod
    def _run_stage(
        stage: str,
        func: Callable[[list[OutputAsset]], Any],
        files: list[OutputAsset],
        build_id: str,
    ) -> Any:
        try:
            result = func(files)
        except Exception as exc:
            logger.error(
                "Manifest %s stage failed for build %s (%d assets): %s",
                stage,
                build_id or "-",
                len(files),
                exc,
            )
            raise PipelineStageError(
                f"Manifest {stage} stage failed for build {build_id or '-'} "
                f"({len(files)} assets): {exc}",
                stage=stage,
                asset_count=len(files),
                build_id=build_id,
            ) from exc
        if stage != "generate":
            logger.debug("Stage %s kept %d assets", stage, len(result))
        return result
