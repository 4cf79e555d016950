"""Build output and output asset models.

``ChunkRecord`` and ``BuildOutput`` describe what the build engine reports
when a build pass completes.  ``OutputAsset`` is the normalized entry the
manifest pipeline works on.
"""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


class OutputAsset(BaseModel):
    """One file produced by a build.

    ``name`` is the logical key written into the manifest, ``path`` the
    reference consumers use to fetch the file.  Both use forward slashes.
    Assets are frozen: a ``map`` hook returns a new asset via
    ``asset.model_copy(update={...})`` rather than editing in place.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    source_chunk_name: str | None = None
    is_initial: bool = False
    is_auxiliary: bool = False
    chunk_hash: str | None = None
    is_chunk: bool = False


class ChunkRecord(BaseModel):
    """A named (or nameless) logical grouping of output files."""

    model_config = ConfigDict(frozen=True)

    id: str | int
    name: str | None = None
    files: list[str] = Field(default_factory=list)
    auxiliary_files: list[str] = Field(default_factory=list)
    hash: str = ""
    is_initial: bool = True


class BuildOutput(BaseModel):
    """Everything a completed build pass reports to the manifest pipeline.

    ``assets`` lists every emitted file, including files other producers
    (copy steps, loaders) added to the same output set.  ``module_assets``
    maps a loader-emitted file to the source name it was produced from.
    """

    model_config = ConfigDict(frozen=True)

    build_id: str = Field(default_factory=lambda: f"build-{uuid.uuid4().hex[:12]}")
    hash: str = ""
    output_path: str = ""
    public_path: str = ""
    filename_template: str = "[name].js"
    chunks: list[ChunkRecord] = Field(default_factory=list)
    assets: list[str] = Field(default_factory=list)
    module_assets: dict[str, str] = Field(default_factory=dict)
