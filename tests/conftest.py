"""Shared test fixtures for assetmanifest."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from assetmanifest.core.collector import AssetCollector
from assetmanifest.core.state import ManifestState
from assetmanifest.host.memory import InMemoryBuild
from assetmanifest.models.assets import BuildOutput, ChunkRecord, OutputAsset

OUTPUT_DIR = "/build/out"
BUILD_HASH = "0123456789abcdef0123"


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def memory_build() -> InMemoryBuild:
    """Provide an in-memory build rooted at the shared output directory."""
    return InMemoryBuild(OUTPUT_DIR)


@pytest.fixture
def state() -> ManifestState:
    """Provide a fresh, unseeded ManifestState."""
    return ManifestState()


@pytest.fixture
def collector() -> AssetCollector:
    return AssetCollector()


# ---------------------------------------------------------------------------
# Factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_asset() -> Callable[..., OutputAsset]:
    """Factory fixture: build an OutputAsset with sensible defaults."""

    def _factory(name: str = "main.js", path: str | None = None, **overrides: Any) -> OutputAsset:
        defaults: dict[str, Any] = {
            "name": name,
            "path": path if path is not None else name,
            "is_initial": True,
            "is_chunk": True,
            "source_chunk_name": name.split(".")[0],
        }
        defaults.update(overrides)
        return OutputAsset(**defaults)

    return _factory


@pytest.fixture
def make_chunk() -> Callable[..., ChunkRecord]:
    """Factory fixture: build a ChunkRecord with sensible defaults."""

    def _factory(
        name: str | None = "main",
        files: list[str] | None = None,
        **overrides: Any,
    ) -> ChunkRecord:
        defaults: dict[str, Any] = {
            "id": overrides.pop("id", name if name is not None else 0),
            "name": name,
            "files": files if files is not None else [f"{name}.js"],
            "hash": f"chunk-{name}",
        }
        defaults.update(overrides)
        return ChunkRecord(**defaults)

    return _factory


@pytest.fixture
def make_build_output(make_chunk: Callable[..., ChunkRecord]) -> Callable[..., BuildOutput]:
    """Factory fixture: build a BuildOutput from entry names.

    ``entries`` are chunk names; every chunk file is also listed in
    ``assets`` the way a build engine reports all emitted files.
    """

    def _factory(
        entries: tuple[str, ...] = ("main",),
        *,
        extra_assets: tuple[str, ...] = (),
        chunks: list[ChunkRecord] | None = None,
        **overrides: Any,
    ) -> BuildOutput:
        chunk_list = chunks if chunks is not None else [make_chunk(name) for name in entries]
        emitted = [path for chunk in chunk_list for path in chunk.files + chunk.auxiliary_files]
        defaults: dict[str, Any] = {
            "build_id": "build-test-001",
            "hash": BUILD_HASH,
            "output_path": OUTPUT_DIR,
            "chunks": chunk_list,
            "assets": emitted + list(extra_assets),
        }
        defaults.update(overrides)
        return BuildOutput(**defaults)

    return _factory
