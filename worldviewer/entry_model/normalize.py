"""Normalize raw backend results into canonical entry trees.

Backends have returned several shapes over time: a root node object with a
``children`` array, a bare array of root entries, flat file lists with an
``is_dir`` flag, and a separate record-key list (``records`` or ``db_keys``).
Everything funnels through ``normalize`` so downstream code only sees
``DirectoryEntry``/``FileEntry`` trees.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..errors import InvalidEntry
from .types import (
    DEFAULT_ROOT_NAME,
    RECORDS_DIRECTORY_NAME,
    DirectoryEntry,
    Entry,
    FileEntry,
    StructuralPath,
    empty_root,
)

logger = logging.getLogger(__name__)

_DIRECTORY_TAGS = frozenset({"directory", "dir", "folder"})
_FILE_TAGS = frozenset({"file"})
_DIRECTORY_FLAGS = ("is_dir", "is_directory", "isDirectory")
_RECORD_KEYS = ("records", "db_keys")
_RESULT_KEYS = frozenset({"root", "files", *_RECORD_KEYS})
_NODE_KEYS = frozenset({"children", "kind", "type", *_DIRECTORY_FLAGS})


def _coerce_name(value: object, path: StructuralPath) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidEntry(f"entry name must be a non-empty string, got {value!r}", path)
    return value


def _coerce_size(value: object, path: StructuralPath) -> int:
    """Return a non-negative integer size; absent sizes become ``0``."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEntry(f"entry size must be an integer, got {value!r}", path)
    if value < 0:
        raise InvalidEntry(f"entry size must be non-negative, got {value}", path)
    return value


def _node_is_directory(node: Mapping[str, object], path: StructuralPath) -> bool:
    """Discriminate directory vs file by tag, then flag, then ``children``."""
    tag = node.get("kind", node.get("type"))
    if tag is not None:
        folded = str(tag).lower()
        if folded in _DIRECTORY_TAGS:
            return True
        if folded in _FILE_TAGS:
            return False
        raise InvalidEntry(f"unknown entry kind {tag!r}", path)
    for flag in _DIRECTORY_FLAGS:
        if flag in node:
            return bool(node[flag])
    return "children" in node


def _child_sequence(value: object, path: StructuralPath) -> Iterable[object]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or isinstance(value, Mapping) or not isinstance(value, Iterable):
        raise InvalidEntry(f"children must be a list, got {type(value).__name__}", path)
    return value


def _normalize_node(node: object, parent_path: StructuralPath, index: int) -> Entry:
    placeholder = (*parent_path, f"[{index}]")
    if isinstance(node, FileEntry):
        return node
    if isinstance(node, DirectoryEntry):
        path = (*parent_path, node.name)
        return DirectoryEntry(
            name=node.name,
            children=_normalize_children(node.children, path),
        )
    if not isinstance(node, Mapping):
        raise InvalidEntry(f"unsupported entry shape {type(node).__name__}", placeholder)

    name = _coerce_name(node.get("name"), placeholder)
    path = (*parent_path, name)
    if _node_is_directory(node, path):
        return DirectoryEntry(name=name, children=_normalize_children(node.get("children"), path))
    return FileEntry(name=name, size=_coerce_size(node.get("size"), path))


def _normalize_children(children: object, path: StructuralPath) -> tuple[Entry, ...]:
    return tuple(
        _normalize_node(child, path, index)
        for index, child in enumerate(_child_sequence(children, path))
    )


def _normalize_root(node: object, root_name: str) -> DirectoryEntry:
    if node is None:
        return DirectoryEntry(name=root_name, children=())
    if isinstance(node, DirectoryEntry):
        return DirectoryEntry(name=node.name, children=_normalize_children(node.children, (node.name,)))
    if isinstance(node, Mapping):
        # The root may omit its name; every other entry must carry one.
        raw_name = node.get("name")
        name = root_name if raw_name is None else _coerce_name(raw_name, (root_name,))
        tagged = any(key in node for key in ("kind", "type", *_DIRECTORY_FLAGS))
        if tagged and not _node_is_directory(node, (name,)):
            raise InvalidEntry("root entry must be a directory", (name,))
        return DirectoryEntry(name=name, children=_normalize_children(node.get("children"), (name,)))
    return DirectoryEntry(name=root_name, children=_normalize_children(node, (root_name,)))


def _normalize_record(item: object, parent_path: StructuralPath, index: int) -> FileEntry:
    placeholder = (*parent_path, f"[{index}]")
    if isinstance(item, FileEntry):
        return item
    if isinstance(item, str):
        return FileEntry(name=_coerce_name(item, placeholder), size=0)
    if isinstance(item, Mapping):
        name = _coerce_name(item.get("name"), placeholder)
        return FileEntry(name=name, size=_coerce_size(item.get("size"), (*parent_path, name)))
    raise InvalidEntry(f"unsupported record shape {type(item).__name__}", placeholder)


def normalize_records(records: object, root_name: str = DEFAULT_ROOT_NAME) -> tuple[FileEntry, ...]:
    """Convert a flat record-key list into ``FileEntry`` children, keeping order."""
    parent_path = (root_name, RECORDS_DIRECTORY_NAME)
    return tuple(
        _normalize_record(item, parent_path, index)
        for index, item in enumerate(_child_sequence(records, parent_path))
    )


def install_record_collection(root: DirectoryEntry, records: tuple[FileEntry, ...]) -> DirectoryEntry:
    """Return a new root whose single ``db`` directory holds ``records``.

    An existing root-level entry named ``db`` is replaced in place rather than
    merged; further duplicates are dropped. Without one the directory is
    appended.
    """
    collection = DirectoryEntry(name=RECORDS_DIRECTORY_NAME, children=records)
    children: list[Entry] = []
    installed = False
    for child in root.children:
        if child.name != RECORDS_DIRECTORY_NAME:
            children.append(child)
            continue
        if not installed:
            children.append(collection)
            installed = True
    if not installed:
        children.append(collection)
    return DirectoryEntry(name=root.name, children=tuple(children))


def _split_raw(raw: object) -> tuple[object, object]:
    """Split a raw backend result into ``(root_node, records)``."""
    if isinstance(raw, DirectoryEntry):
        # Canonical trees carry their records inside ``db``.
        records: object = None
        for child in raw.children:
            if child.name == RECORDS_DIRECTORY_NAME and isinstance(child, DirectoryEntry):
                records = child.children
                break
        return raw, records
    if isinstance(raw, Mapping) and _RESULT_KEYS.intersection(raw.keys()):
        if "root" in raw or "files" in raw:
            root_node = raw.get("root")
            if root_node is None:
                root_node = raw.get("files")
        elif _NODE_KEYS.intersection(raw.keys()):
            # A root node carrying its own record list.
            root_node = raw
        else:
            root_node = None
        records = None
        for key in _RECORD_KEYS:
            if raw.get(key) is not None:
                records = raw[key]
                break
        return root_node, records
    return raw, None


def normalize(raw: object, *, root_name: str = DEFAULT_ROOT_NAME) -> DirectoryEntry:
    """Convert any supported raw backend result into a canonical root directory.

    Pure and atomic: the input is never mutated and ``InvalidEntry`` is raised
    before any tree is returned when a raw entry breaks the naming/size
    invariants.
    """
    if not root_name:
        raise InvalidEntry("root name must be non-empty")
    if raw is None:
        return empty_root(root_name)
    root_node, raw_records = _split_raw(raw)
    root = _normalize_root(root_node, root_name)
    records = normalize_records(raw_records, root.name)
    tree = install_record_collection(root, records)
    logger.debug(
        "normalized container tree %r: %d root entries, %d records",
        tree.name,
        len(tree.children),
        len(records),
    )
    return tree


__all__ = [
    "normalize",
    "normalize_records",
    "install_record_collection",
]
