"""Asset collection — turns one completed build into OutputAsset entries.

Chunk files come first, in chunk order, followed by every other emitted
file (copied files, loader outputs).  Nothing is filtered or renamed
beyond deriving logical names; that is the pipeline's job.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from assetmanifest.core.naming import file_type, render_filename
from assetmanifest.models.assets import BuildOutput, ChunkRecord, OutputAsset

logger = logging.getLogger(__name__)


class CollectionError(RuntimeError):
    """Raised when a build's output structure cannot be read."""

    def __init__(
        self,
        message: str,
        *,
        build_id: str = "",
        asset_count: int = 0,
    ) -> None:
        super().__init__(message)
        self.stage = "collect"
        self.build_id = build_id
        self.asset_count = asset_count


class AssetCollector:
    """Extracts the files a build pass emitted as ``OutputAsset`` entries."""

    def collect(self, build_output: BuildOutput | Mapping[str, Any]) -> list[OutputAsset]:
        """Return the build's emitted files, chunk files first.

        Raises
        ------
        CollectionError
            If *build_output* is a mapping that does not describe a build.
        """
        output = self.coerce(build_output)

        assets: list[OutputAsset] = []
        seen: set[str] = set()

        for chunk in output.chunks:
            for path, auxiliary in self._chunk_files(chunk, output):
                if path in seen:
                    continue
                seen.add(path)
                assets.append(self._chunk_asset(chunk, path, auxiliary))

        for path in output.assets:
            if path in seen:
                continue
            seen.add(path)
            assets.append(
                OutputAsset(
                    name=output.module_assets.get(path, path),
                    path=path,
                    is_auxiliary=path.endswith(".map"),
                )
            )

        logger.info(
            "Collected %d assets from build %s (%d chunks)",
            len(assets),
            output.build_id,
            len(output.chunks),
        )
        return assets

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def coerce(build_output: BuildOutput | Mapping[str, Any]) -> BuildOutput:
        """Validate a raw build report into a ``BuildOutput``."""
        if isinstance(build_output, BuildOutput):
            return build_output
        if not isinstance(build_output, Mapping):
            raise CollectionError(
                f"Build output must be a BuildOutput or mapping, "
                f"got {type(build_output).__name__}"
            )
        try:
            return BuildOutput.model_validate(dict(build_output))
        except ValidationError as exc:
            build_id = str(build_output.get("build_id", ""))
            raise CollectionError(
                f"Malformed build output: {exc}", build_id=build_id
            ) from exc

    @staticmethod
    def _chunk_files(
        chunk: ChunkRecord, output: BuildOutput
    ) -> list[tuple[str, bool]]:
        """Files of *chunk* paired with their auxiliary flag.

        A chunk that lists no files gets its file name from the build's
        output template, so hashed names come out fully evaluated.
        """
        files = list(chunk.files)
        if not files and not chunk.auxiliary_files:
            files = [
                render_filename(
                    output.filename_template,
                    name=chunk.name,
                    chunk_id=chunk.id,
                    build_hash=output.hash,
                    chunk_hash=chunk.hash,
                )
            ]
        pairs = [(path, path.endswith(".map")) for path in files]
        pairs.extend((path, True) for path in chunk.auxiliary_files)
        return pairs

    @staticmethod
    def _chunk_asset(chunk: ChunkRecord, path: str, auxiliary: bool) -> OutputAsset:
        name = f"{chunk.name}.{file_type(path)}" if chunk.name else path
        logger.debug("Chunk %s file %s -> %s", chunk.id, path, name)
        return OutputAsset(
            name=name,
            path=path,
            source_chunk_name=chunk.name,
            is_initial=chunk.is_initial,
            is_auxiliary=auxiliary,
            chunk_hash=chunk.hash or None,
            is_chunk=True,
        )
