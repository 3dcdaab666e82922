"""Single-entry selection and the preview payload derived from it."""

from __future__ import annotations

from dataclasses import dataclass

from ..entry_model import DirectoryEntry, Entry, StructuralPath

NO_SELECTION_TEXT = "Select a file to preview its contents"
DIRECTORY_PREVIEW_TEXT = "This is a folder. Select a file to view its contents."


@dataclass(frozen=True)
class Preview:
    """Preview payload: ``empty``, ``directory``, or ``file`` with its size."""

    kind: str
    title: str
    text: str
    size: int | None = None


def build_preview(entry: Entry | None) -> Preview:
    """Derive preview metadata for ``entry``; no content is ever read."""
    if entry is None:
        return Preview(kind="empty", title="", text=NO_SELECTION_TEXT)
    if isinstance(entry, DirectoryEntry):
        return Preview(kind="directory", title=entry.name, text=DIRECTORY_PREVIEW_TEXT)
    return Preview(kind="file", title=entry.name, text=f"{entry.size} bytes", size=entry.size)


class SelectionState:
    """Holds at most one selected entry plus its structural path.

    ``select`` never validates against the current tree; selections are
    cleared when a new load is issued instead.
    """

    def __init__(self) -> None:
        self._entry: Entry | None = None
        self._path: StructuralPath | None = None

    def select(self, entry: Entry, path: StructuralPath) -> None:
        self._entry = entry
        self._path = tuple(path)

    def clear(self) -> None:
        self._entry = None
        self._path = None

    @property
    def current(self) -> Entry | None:
        return self._entry

    @property
    def current_path(self) -> StructuralPath | None:
        return self._path

    def preview(self) -> Preview:
        return build_preview(self._entry)


__all__ = [
    "NO_SELECTION_TEXT",
    "DIRECTORY_PREVIEW_TEXT",
    "Preview",
    "build_preview",
    "SelectionState",
]
