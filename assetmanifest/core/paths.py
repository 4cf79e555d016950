"""Path normalization and base/public prefixing for manifest entries.

Keys (logical names) take the base path; values (reference paths) take the
public path.  Anything that already looks absolute, a full URL or a rooted
filesystem path, is left alone so a prefix is never applied twice.
Resolution never raises: a derived artifact must not break the build.
"""

from __future__ import annotations

import re
from pathlib import PureWindowsPath

from assetmanifest.models.assets import OutputAsset

_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z\d+\-.]*://")


def normalize_separators(value: str) -> str:
    """Replace host-native backslashes with forward slashes."""
    return value.replace("\\", "/")


def is_absolute_url(value: str) -> bool:
    """True for ``scheme://`` URLs, rooted paths and Windows drive paths."""
    if not value:
        return False
    if _URL_SCHEME.match(value):
        return True
    if value.startswith("/"):
        return True
    return PureWindowsPath(value).is_absolute()


def join_prefix(prefix: str, value: str) -> str:
    """Join *prefix* and *value* with exactly the separator the prefix lacks."""
    if not prefix:
        return value
    if prefix.endswith("/") or value.startswith("/"):
        return prefix + value
    return f"{prefix}/{value}"


class PathResolver:
    """Resolves raw asset names and paths into manifest keys and values.

    Parameters
    ----------
    base_path:
        Prefix for manifest keys.
    public_path:
        Prefix for manifest values.
    base_path_for_values:
        When no public path is set, prefix values with ``base_path`` too.
    """

    def __init__(
        self,
        base_path: str = "",
        public_path: str | None = None,
        *,
        base_path_for_values: bool = False,
    ) -> None:
        self.base_path = base_path or ""
        self.public_path = public_path or ""
        self.base_path_for_values = base_path_for_values

    def resolve(self, name: str, path: str) -> tuple[str, str]:
        """Return ``(resolved_name, resolved_path)``."""
        return resolve(
            name,
            path,
            self.base_path,
            self.public_path,
            base_path_for_values=self.base_path_for_values,
        )

    def resolve_asset(self, asset: OutputAsset) -> OutputAsset:
        """Return a copy of *asset* with its name and path resolved."""
        name, path = self.resolve(asset.name, asset.path)
        if name == asset.name and path == asset.path:
            return asset
        return asset.model_copy(update={"name": name, "path": path})

    def __repr__(self) -> str:
        return (
            f"PathResolver(base_path={self.base_path!r}, "
            f"public_path={self.public_path!r})"
        )


def resolve(
    name: str,
    path: str,
    base_path: str = "",
    public_path: str = "",
    *,
    base_path_for_values: bool = False,
) -> tuple[str, str]:
    """Normalize separators, then apply base and public path prefixes."""
    if not isinstance(name, str) or not isinstance(path, str):
        return name, path

    resolved_name = normalize_separators(name)
    resolved_path = normalize_separators(path)

    if base_path and not is_absolute_url(resolved_name):
        resolved_name = join_prefix(base_path, resolved_name)

    if not is_absolute_url(resolved_path):
        if public_path:
            resolved_path = join_prefix(public_path, resolved_path)
        elif base_path and base_path_for_values:
            resolved_path = join_prefix(base_path, resolved_path)

    return resolved_name, resolved_path
