"""Structural-path traversal helpers over canonical entry trees."""

from __future__ import annotations

from collections.abc import Iterator

from .types import DirectoryEntry, Entry, StructuralPath


def walk_entries(root: Entry) -> Iterator[tuple[StructuralPath, Entry]]:
    """Yield ``(path, entry)`` pairs depth-first in child order, root first."""
    stack: list[tuple[StructuralPath, Entry]] = [((root.name,), root)]
    while stack:
        path, entry = stack.pop()
        yield path, entry
        if isinstance(entry, DirectoryEntry):
            for child in reversed(entry.children):
                stack.append(((*path, child.name), child))


def find_entry(root: Entry, path: StructuralPath) -> Entry | None:
    """Return the entry addressed by ``path`` or ``None`` when absent.

    Sibling names may repeat; the first sibling with a matching name wins at
    each level.
    """
    if not path or path[0] != root.name:
        return None
    current: Entry = root
    for name in path[1:]:
        if not isinstance(current, DirectoryEntry):
            return None
        for child in current.children:
            if child.name == name:
                current = child
                break
        else:
            return None
    return current


def count_entries(root: Entry) -> tuple[int, int]:
    """Return ``(directory_count, file_count)`` for the whole tree."""
    directories = 0
    files = 0
    for _path, entry in walk_entries(root):
        if isinstance(entry, DirectoryEntry):
            directories += 1
        else:
            files += 1
    return directories, files


__all__ = [
    "walk_entries",
    "find_entry",
    "count_entries",
]
