"""Tests for host adapters — build handle protocol, memory and disk builds, stats loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from assetmanifest.core.collector import CollectionError
from assetmanifest.host import BuildHandle
from assetmanifest.host.local import LocalDiskBuild
from assetmanifest.host.memory import InMemoryBuild
from assetmanifest.host.stats import load_build_output


class TestBuildHandleProtocol:
    def test_memory_build_conforms(self):
        assert isinstance(InMemoryBuild(), BuildHandle)

    def test_local_build_conforms(self, tmp_dir: Path):
        assert isinstance(LocalDiskBuild(tmp_dir), BuildHandle)


class TestInMemoryBuild:
    def test_emit_and_read(self):
        build = InMemoryBuild("/out")
        build.emit_artifact(Path("/out/manifest.json"), "{}")
        assert build.read("manifest.json") == "{}"
        assert build.read("/out/manifest.json") == "{}"

    def test_read_missing(self):
        with pytest.raises(FileNotFoundError):
            InMemoryBuild("/out").read("missing.json")


class TestLocalDiskBuild:
    def test_writes_nested_targets(self, tmp_dir: Path):
        build = LocalDiskBuild(tmp_dir)
        target = tmp_dir / "nested" / "manifest.json"
        build.emit_artifact(target, '{"a": "b"}')
        assert build.read_manifest("nested/manifest.json") == {"a": "b"}
        assert build.written == [target]


class TestLoadBuildOutput:
    def test_loads_stats(self, tmp_dir: Path):
        stats = tmp_dir / "stats.json"
        stats.write_text(
            json.dumps(
                {
                    "build_id": "b1",
                    "chunks": [{"id": 0, "name": "main", "files": ["main.js"]}],
                    "assets": ["main.js"],
                }
            )
        )
        output = load_build_output(stats)
        assert output.build_id == "b1"
        assert output.chunks[0].files == ["main.js"]

    def test_missing_file(self, tmp_dir: Path):
        with pytest.raises(CollectionError, match="Cannot read"):
            load_build_output(tmp_dir / "nope.json")

    def test_invalid_json(self, tmp_dir: Path):
        stats = tmp_dir / "stats.json"
        stats.write_text("not json")
        with pytest.raises(CollectionError, match="Invalid JSON"):
            load_build_output(stats)

    def test_non_object(self, tmp_dir: Path):
        stats = tmp_dir / "stats.json"
        stats.write_text("[]")
        with pytest.raises(CollectionError, match="JSON object"):
            load_build_output(stats)

    def test_malformed_build(self, tmp_dir: Path):
        stats = tmp_dir / "stats.json"
        stats.write_text(json.dumps({"chunks": [{"files": "x"}]}))
        with pytest.raises(CollectionError, match="Malformed"):
            load_build_output(stats)
