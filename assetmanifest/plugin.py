"""Manifest plugin — the build-completion callback wiring the pipeline together.

The ManifestPlugin reacts to completed builds; it never calls into the
host on its own.  Every completion runs the same sequence:

    collect -> resolve -> merge -> filter/map/sort/generate -> emit

Collection, stage and serialization failures abort the manifest for that
pass only.  They are logged with context and appended to the build's
error list.  Write failures propagate to the host unchanged.  A failing
after-emit handler is reported the same way and leaves the written
artifact in place.  Merge, pipeline and emit run under the state lock so
builds sharing a state never publish a stale manifest.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from assetmanifest.core.collector import AssetCollector, CollectionError
from assetmanifest.core.emitter import Emitter, SerializationError
from assetmanifest.core.paths import PathResolver
from assetmanifest.core.pipeline import Pipeline, PipelineStageError
from assetmanifest.core.state import ManifestState
from assetmanifest.host import BuildHandle
from assetmanifest.models.artifacts import ManifestArtifact
from assetmanifest.models.assets import BuildOutput
from assetmanifest.models.config import PipelineConfig

logger = logging.getLogger(__name__)

EmitHandler = Callable[[Any, ManifestArtifact], None]


class EmitHandlerError(RuntimeError):
    """Reported when an after-emit handler fails; the artifact is already written."""

    def __init__(self, message: str, *, build_id: str = "") -> None:
        super().__init__(message)
        self.stage = "emit-handler"
        self.build_id = build_id


class ManifestPlugin:
    """Aggregates completed builds into a manifest artifact.

    Parameters
    ----------
    config:
        Pipeline configuration.  Uses defaults if not provided.
    state:
        Accumulator to merge into.  Pass the same state to several plugins
        to combine the manifests of several compilations; by default each
        plugin owns a fresh state seeded from ``config.seed``.
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        *,
        state: ManifestState | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.state = state if state is not None else ManifestState(seed=self.config.seed)
        self.collector = AssetCollector()
        self.pipeline = Pipeline(self.config)
        self.emitter = Emitter(self.config)
        self._emit_handlers: list[EmitHandler] = []
        self._manifest: Any = None
        self._last_artifact: ManifestArtifact | None = None

    def register_emit_handler(self, handler: EmitHandler) -> None:
        """Register a handler called with ``(value, artifact)`` after each emit."""
        self._emit_handlers.append(handler)

    @property
    def manifest(self) -> Any:
        """The manifest value of the last successful emit, or ``None``."""
        return self._manifest

    @property
    def last_artifact(self) -> ManifestArtifact | None:
        """The artifact record of the last successful emit, or ``None``."""
        return self._last_artifact

    # ------------------------------------------------------------------
    # Build completion
    # ------------------------------------------------------------------

    def on_build_complete(
        self,
        build_output: BuildOutput | Mapping[str, Any],
        build: BuildHandle,
    ) -> ManifestArtifact | None:
        """Handle one completed build pass.

        Returns the emitted artifact, or ``None`` if the manifest for this
        pass was aborted (the cause is appended to ``build.errors``).
        """
        try:
            output = self.collector.coerce(build_output)
            assets = self.collector.collect(output)
        except CollectionError as exc:
            self._report(build, exc)
            return None

        public_path = (
            self.config.public_path
            if self.config.public_path is not None
            else output.public_path
        )
        resolver = PathResolver(
            self.config.base_path,
            public_path,
            base_path_for_values=self.config.base_path_for_values,
        )
        resolved = [resolver.resolve_asset(asset) for asset in assets]

        try:
            with self.state.lock:
                self.state.merge(resolved)
                value = self.pipeline.run(self.state, build_id=output.build_id)
                artifact = self.emitter.emit(
                    value,
                    build=build,
                    output_path=output.output_path,
                    build_id=output.build_id,
                )
        except (PipelineStageError, SerializationError) as exc:
            self._report(build, exc)
            return None

        self._manifest = value
        self._last_artifact = artifact
        for handler in self._emit_handlers:
            try:
                handler(value, artifact)
            except Exception as exc:
                error = EmitHandlerError(
                    f"Emit handler {getattr(handler, '__name__', handler)!r} failed "
                    f"for build {output.build_id or '-'}: {exc}",
                    build_id=output.build_id,
                )
                error.__cause__ = exc
                self._report(build, error)
        return artifact

    def _report(self, build: BuildHandle, exc: Exception) -> None:
        logger.error(
            "Manifest failed at %s for build %s: %s",
            getattr(exc, "stage", "unknown"),
            getattr(exc, "build_id", "") or "-",
            exc,
        )
        build.errors.append(exc)

    def __repr__(self) -> str:
        return (
            f"ManifestPlugin(file_name={self.config.file_name!r}, "
            f"state={self.state!r})"
        )
