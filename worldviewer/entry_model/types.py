"""Domain datatypes for container trees with a synthetic record directory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..errors import InvalidEntry

RECORDS_DIRECTORY_NAME = "db"
DEFAULT_ROOT_NAME = "root"

StructuralPath = tuple[str, ...]


@dataclass(frozen=True)
class FileEntry:
    """Leaf entry carrying size metadata only, never content."""

    kind: ClassVar[str] = "file"

    name: str
    size: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidEntry(f"file entry name must be a non-empty string, got {self.name!r}")
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 0:
            raise InvalidEntry(f"file entry {self.name!r} has invalid size {self.size!r}")

    @property
    def is_dir(self) -> bool:
        return False


@dataclass(frozen=True)
class DirectoryEntry:
    """Directory entry with children kept in source insertion order."""

    kind: ClassVar[str] = "directory"

    name: str
    children: tuple["Entry", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidEntry(f"directory entry name must be a non-empty string, got {self.name!r}")

    @property
    def is_dir(self) -> bool:
        return True


Entry = DirectoryEntry | FileEntry


def entry_path(*names: str) -> StructuralPath:
    """Build a structural path from root-first names."""
    return tuple(names)


def parse_entry_path(text: str) -> StructuralPath:
    """Parse a ``/``-separated path such as ``root/db/key`` into a structural path."""
    return tuple(part for part in text.split("/") if part)


def format_entry_path(path: StructuralPath) -> str:
    return "/".join(path)


def is_record_collection(path: StructuralPath) -> bool:
    """Return whether ``path`` addresses the synthetic record directory."""
    return len(path) == 2 and path[1] == RECORDS_DIRECTORY_NAME


def empty_root(name: str = DEFAULT_ROOT_NAME) -> DirectoryEntry:
    return DirectoryEntry(name=name, children=())


__all__ = [
    "RECORDS_DIRECTORY_NAME",
    "DEFAULT_ROOT_NAME",
    "StructuralPath",
    "FileEntry",
    "DirectoryEntry",
    "Entry",
    "entry_path",
    "parse_entry_path",
    "format_entry_path",
    "is_record_collection",
    "empty_root",
]
