"""Canonical entry model for container trees.

This package contains non-UI tree primitives:
- directory/file entry datatypes addressed by structural paths
- traversal helpers keyed by structural path
- the normalizer that turns raw backend results into canonical trees and
  installs the synthetic record directory
"""

from __future__ import annotations

from .normalize import install_record_collection, normalize, normalize_records
from .types import (
    DEFAULT_ROOT_NAME,
    RECORDS_DIRECTORY_NAME,
    DirectoryEntry,
    Entry,
    FileEntry,
    StructuralPath,
    empty_root,
    entry_path,
    format_entry_path,
    is_record_collection,
    parse_entry_path,
)
from .walk import count_entries, find_entry, walk_entries

__all__ = [
    "DEFAULT_ROOT_NAME",
    "RECORDS_DIRECTORY_NAME",
    "DirectoryEntry",
    "Entry",
    "FileEntry",
    "StructuralPath",
    "empty_root",
    "entry_path",
    "format_entry_path",
    "is_record_collection",
    "parse_entry_path",
    "normalize",
    "normalize_records",
    "install_record_collection",
    "walk_entries",
    "find_entry",
    "count_entries",
]
