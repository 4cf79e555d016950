"""Build handle protocol — the manifest pipeline's view of the host build.

The build engine hands every completion callback a handle that can take
one more artifact, carries the build-global shared state other build
steps read, and collects plugin errors for the pass.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class BuildHandle(Protocol):
    """Protocol every host build adapter must implement.

    Attributes
    ----------
    shared_state : dict
        Build-global state shared between build steps of the same pass.
    errors : list
        Plugin errors reported for the current pass.
    """

    shared_state: dict[str, Any]
    errors: list[Exception]

    def emit_artifact(self, target: Path, text: str) -> None:
        """Write *text* as the build artifact at *target*.

        Implementations raise ``OSError`` when the write fails; the
        emitter reports it as a ``WriteError``.
        """
        ...
