"""Pipeline configuration model."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from assetmanifest.config import settings
from assetmanifest.models.assets import OutputAsset


class PipelineConfig(BaseModel):
    """Immutable configuration for one manifest pipeline, resolved at setup.

    Every hook is optional; the pipeline substitutes its default
    implementation for any hook left unset.

    Attributes
    ----------
    base_path:
        Prefix applied to manifest keys.
    public_path:
        Prefix applied to manifest values.  ``None`` defers to the public
        path the build engine reports for each build.
    file_name:
        Location of the serialized manifest, relative to the build's output
        directory unless absolute.
    seed:
        Starting value handed to ``generate``.  Every run receives a fresh
        deep copy, ``{}`` when unset.
    filter, map, sort:
        Applied to the accumulated asset list, in that order.  ``sort`` is
        a comparator returning a negative, zero or positive number.  A
        ``map`` taking two positional arguments also receives the asset's
        position after filtering.
    generate:
        ``(seed, files) -> value`` producing the manifest value.
    serialize:
        ``(value) -> str`` producing the artifact text.
    write_to_disk:
        Also write the artifact straight to the filesystem, for hosts that
        keep build output in memory.
    base_path_for_values:
        Prefix values with ``base_path`` when no public path is available.
    shared_state_key:
        Key under which the manifest value is published for other build steps.
    """

    model_config = ConfigDict(frozen=True)

    base_path: str = ""
    public_path: str | None = None
    file_name: str = Field(default_factory=lambda: settings.default_file_name)
    seed: Any = None
    filter: Callable[[OutputAsset], bool] | None = None
    map: Callable[..., OutputAsset] | None = None
    sort: Callable[[OutputAsset, OutputAsset], int] | None = None
    generate: Callable[[Any, list[OutputAsset]], Any] | None = None
    serialize: Callable[[Any], str] | None = None
    write_to_disk: bool = Field(default_factory=lambda: settings.write_to_disk)
    base_path_for_values: bool = False
    shared_state_key: str = Field(default_factory=lambda: settings.shared_state_key)
