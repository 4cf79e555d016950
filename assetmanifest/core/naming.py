"""Output filename templates and file-type derivation.

Templates use bracketed placeholders, optionally length-limited::

    [name].[hash:8].js   ->  main.1a2b3c4d.js
    [id].[chunkhash].js  ->  3.9f8e....js
"""

from __future__ import annotations

import re

_PLACEHOLDER = re.compile(r"\[(name|id|hash|chunkhash|contenthash)(?::(\d+))?\]")
_QUERY = re.compile(r"\?.*$")
_COMPOUND_EXTENSIONS = ("gz", "map")


def render_filename(
    template: str,
    *,
    name: str | None,
    chunk_id: str | int,
    build_hash: str = "",
    chunk_hash: str = "",
) -> str:
    """Evaluate an output filename template for one chunk.

    ``[name]`` falls back to the chunk id for nameless chunks.
    ``[contenthash]`` is treated as the chunk hash.
    """
    values = {
        "name": name if name is not None else str(chunk_id),
        "id": str(chunk_id),
        "hash": build_hash,
        "chunkhash": chunk_hash,
        "contenthash": chunk_hash,
    }

    def _substitute(match: re.Match[str]) -> str:
        value = values[match.group(1)]
        length = match.group(2)
        return value[: int(length)] if length else value

    return _PLACEHOLDER.sub(_substitute, template)


def file_type(path: str) -> str:
    """Return the file type of *path*, keeping compound types together.

    ``main.js`` -> ``js``; ``main.js.map`` -> ``js.map``;
    ``style.css.gz`` -> ``css.gz``.  Query strings are ignored.
    """
    parts = _QUERY.sub("", path).split(".")
    ext = parts.pop()
    if ext.lower() in _COMPOUND_EXTENSIONS and len(parts) > 1:
        ext = f"{parts.pop()}.{ext}"
    return ext
