"""Reference container readers: zip archives and unpacked directories.

A container reader takes a ``ContainerRef`` and returns the raw result shape
``{"root": [...], "db_keys": [...]}`` consumed by the normalizer, or raises
``BackendFailure``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..errors import BackendFailure
from .archive import read_archive
from .directory import read_directory
from .records import format_record_key, load_records_file, records_from_pairs
from .refs import ArchiveBytes, ContainerRef, DirectoryPath, container_ref_for_path

RecordSource = Callable[[ContainerRef], Iterable[object] | None]


def make_container_reader(
    record_source: RecordSource | None = None,
) -> Callable[[object], dict[str, object]]:
    """Build a ``read_container`` callable dispatching on the reference type."""

    def read_container(ref: object) -> dict[str, object]:
        if not isinstance(ref, (ArchiveBytes, DirectoryPath)):
            raise BackendFailure(f"Unsupported container reference: {ref!r}")
        records = record_source(ref) if record_source is not None else None
        if isinstance(ref, ArchiveBytes):
            return read_archive(ref.data, records=records)
        return read_directory(ref.path, records=records)

    return read_container


__all__ = [
    "ArchiveBytes",
    "ContainerRef",
    "DirectoryPath",
    "RecordSource",
    "container_ref_for_path",
    "format_record_key",
    "load_records_file",
    "make_container_reader",
    "read_archive",
    "read_directory",
    "records_from_pairs",
]
