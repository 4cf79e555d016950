"""Cross-build manifest accumulator.

A ``ManifestState`` lives as long as the build session that owns it.  It
is mutated only by :meth:`ManifestState.merge`; pipeline stages read a
snapshot and never write back, so a failed generation cannot poison later
build passes.

Sharing one state between several plugins combines the manifests of
several compilations.  Merges are serialized through a single lock.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Iterable
from typing import Any

from assetmanifest.models.assets import OutputAsset

logger = logging.getLogger(__name__)


class ManifestState:
    """Seed plus the ordered, name-unique list of assets seen so far.

    Parameters
    ----------
    seed:
        Starting value for generation.  ``None`` means a fresh ``{}``.
    """

    def __init__(self, seed: Any = None) -> None:
        self._seed = copy.deepcopy(seed) if seed is not None else {}
        self._assets: list[OutputAsset] = []
        self._index: dict[str, int] = {}
        self._lock = threading.RLock()
        self._merges = 0

    @property
    def lock(self) -> threading.RLock:
        """The lock serializing merges; hold it to merge and snapshot together."""
        return self._lock

    @property
    def seed(self) -> Any:
        """A deep copy of the configured seed."""
        return copy.deepcopy(self._seed)

    @property
    def assets(self) -> list[OutputAsset]:
        """Snapshot of the accumulated assets, in insertion order."""
        with self._lock:
            return list(self._assets)

    @property
    def merge_count(self) -> int:
        """Number of merges applied so far."""
        return self._merges

    def fresh_seed(self) -> Any:
        """Seed instance for one generation run, never shared between runs."""
        return copy.deepcopy(self._seed)

    def merge(self, new_assets: Iterable[OutputAsset]) -> ManifestState:
        """Merge one build's assets into the state.

        - an identical asset already present: skipped;
        - same ``name`` with a different path or metadata: replaced in place;
        - otherwise appended.

        Merging the same assets twice leaves the state unchanged.
        """
        appended = replaced = skipped = 0
        with self._lock:
            for asset in new_assets:
                position = self._index.get(asset.name)
                if position is None:
                    self._index[asset.name] = len(self._assets)
                    self._assets.append(asset)
                    appended += 1
                elif self._assets[position] == asset:
                    skipped += 1
                else:
                    self._assets[position] = asset
                    replaced += 1
            self._merges += 1

        logger.debug(
            "Merged assets: appended=%d replaced=%d skipped=%d total=%d",
            appended,
            replaced,
            skipped,
            len(self._assets),
        )
        return self

    def get(self, name: str) -> OutputAsset | None:
        """Return the accumulated asset called *name*, if any."""
        with self._lock:
            position = self._index.get(name)
            return self._assets[position] if position is not None else None

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"ManifestState(assets={len(self._assets)}, merges={self._merges})"
