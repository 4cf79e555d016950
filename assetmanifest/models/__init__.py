"""Asset manifest data models — all Pydantic v2, all frozen (immutable)."""

from assetmanifest.models.artifacts import ManifestArtifact
from assetmanifest.models.assets import BuildOutput, ChunkRecord, OutputAsset
from assetmanifest.models.config import PipelineConfig

__all__ = [
    # assets
    "OutputAsset",
    "ChunkRecord",
    "BuildOutput",
    # artifacts
    "ManifestArtifact",
    # config
    "PipelineConfig",
]
