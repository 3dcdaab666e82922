"""Container references accepted by the load coordinator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import BackendFailure


@dataclass(frozen=True)
class ArchiveBytes:
    """In-memory zip archive (for example a ``.mcworld`` export)."""

    data: bytes = field(repr=False)
    name: str = "archive"


@dataclass(frozen=True)
class DirectoryPath:
    """Unpacked container directory on disk."""

    path: Path


ContainerRef = ArchiveBytes | DirectoryPath


def container_ref_for_path(path: Path) -> ContainerRef:
    """Pick the container reference for a user-supplied path.

    Directories are read in place; any other file is read into memory and
    treated as an archive.
    """
    if path.is_dir():
        return DirectoryPath(path=path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise BackendFailure(f"Failed to read {path}: {exc}") from exc
    return ArchiveBytes(data=data, name=path.name)


__all__ = [
    "ArchiveBytes",
    "DirectoryPath",
    "ContainerRef",
    "container_ref_for_path",
]
