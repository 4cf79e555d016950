"""assetmanifest: aggregate build outputs into a declarative asset manifest.

Each completed build is collected into output assets, normalized with
base and public path prefixes, merged into a cross-build state and run
through a configurable filter -> map -> sort -> generate pipeline.  The
result is serialized as a build artifact and published to the build's
shared state.
"""

__version__ = "0.1.0"
__description__ = "Aggregates build outputs into a declarative asset manifest"

from assetmanifest.core.state import ManifestState
from assetmanifest.models.config import PipelineConfig
from assetmanifest.plugin import ManifestPlugin
from assetmanifest.cli.app import app as cli

__all__ = ["ManifestPlugin", "ManifestState", "PipelineConfig", "cli", "__version__"]
