"""Zip-archive reader producing raw container results."""

from __future__ import annotations

import io
import logging
import zipfile
from collections.abc import Iterable

from ..errors import BackendFailure

logger = logging.getLogger(__name__)

RawNode = dict[str, object]


def _insert_entry(children: list[RawNode], parts: list[str], entry: RawNode) -> None:
    """Insert ``entry`` below ``children`` following ``parts[:-1]`` as directories.

    Intermediate directories are found by name or created in encounter order.
    """
    for part in parts[:-1]:
        for child in children:
            if child.get("type") == "directory" and child.get("name") == part:
                break
        else:
            child = {"type": "directory", "name": part, "children": []}
            children.append(child)
        children = child["children"]
    children.append(entry)


def read_archive(data: bytes, *, records: Iterable[object] | None = None) -> dict[str, object]:
    """Return ``{"root": [...], "db_keys": [...]}`` for zip ``data``.

    Directory members are skipped; directories are inferred from file paths.
    """
    try:
        archive = zipfile.ZipFile(io.BytesIO(data))
    except (zipfile.BadZipFile, OSError, ValueError) as exc:
        raise BackendFailure(f"Failed to read zip archive: {exc}") from exc

    root: list[RawNode] = []
    with archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            parts = [part for part in info.filename.split("/") if part]
            if not parts:
                continue
            _insert_entry(root, parts, {"type": "file", "name": parts[-1], "size": info.file_size})
        logger.debug("read zip archive with %d members", len(archive.infolist()))
    return {"root": root, "db_keys": list(records or [])}


__all__ = ["read_archive"]
