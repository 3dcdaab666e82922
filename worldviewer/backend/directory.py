"""On-disk directory reader producing raw container results."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import BackendFailure

RawNode = dict[str, object]


def _scan(directory: Path) -> list[RawNode]:
    """List ``directory`` recursively, name-sorted, without following symlinks."""
    with os.scandir(directory) as entries:
        children = sorted(entries, key=lambda item: item.name)

    nodes: list[RawNode] = []
    for child in children:
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False

        if is_dir:
            try:
                grandchildren = _scan(Path(child.path))
            except OSError:
                grandchildren = []
            nodes.append({"type": "directory", "name": child.name, "children": grandchildren})
            continue

        try:
            size = int(child.stat(follow_symlinks=False).st_size)
        except OSError:
            size = 0
        nodes.append({"type": "file", "name": child.name, "size": size})
    return nodes


def read_directory(path: Path, *, records: Iterable[object] | None = None) -> dict[str, object]:
    """Return ``{"root": [...], "db_keys": [...]}`` for an unpacked container."""
    root = Path(path)
    if not root.is_dir():
        raise BackendFailure(f"Not a directory: {root}")
    try:
        children = _scan(root)
    except OSError as exc:
        raise BackendFailure(f"Failed to read directory {root}: {exc}") from exc
    return {"root": children, "db_keys": list(records or [])}


__all__ = ["read_directory"]
