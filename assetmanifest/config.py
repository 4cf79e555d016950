"""Process-wide settings — env-driven defaults for manifest emission.

Centralized config using pydantic-settings for environment variable
support. Reads from a .env file and ASSETMANIFEST_* environment variables.
Per-pipeline options live on :class:`assetmanifest.models.config.PipelineConfig`;
these settings only supply the defaults that configuration falls back to.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ManifestSettings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export ASSETMANIFEST_LOG_LEVEL=DEBUG
        export ASSETMANIFEST_DEFAULT_FILE_NAME=asset-manifest.json

    Or via .env file::

        ASSETMANIFEST_WRITE_TO_DISK=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ASSETMANIFEST_",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "INFO"

    # Emission defaults
    default_file_name: str = "manifest.json"
    indent: int = 2
    shared_state_key: str = "asset-manifest"
    write_to_disk: bool = False


# Module-level singleton — import as `from assetmanifest.config import settings`
settings = ManifestSettings()
