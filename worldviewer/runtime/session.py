"""Browser session composing the owned tree-view state containers."""

from __future__ import annotations

from collections.abc import Callable

from ..entry_model import DEFAULT_ROOT_NAME, DirectoryEntry, StructuralPath, find_entry
from ..tree_model import (
    DEFAULT_VIEWPORT_ROWS,
    DEFAULT_WINDOW_PADDING,
    DEFAULT_WINDOW_THRESHOLD,
    ExpansionState,
    TreeRow,
    build_visible_rows,
)
from .load_coordinator import LoadCoordinator, LoadOutcome, LoadRequest, PublishedTree
from .selection import Preview, SelectionState


class BrowserSession:
    """One container browser: published tree, expansion, selection, window scrolls.

    Every piece of state has a single owner and is mutated only from the
    thread driving the session.
    """

    def __init__(
        self,
        read_container: Callable[[object], object],
        *,
        window_threshold: int = DEFAULT_WINDOW_THRESHOLD,
        window_padding: int = DEFAULT_WINDOW_PADDING,
        root_name: str = DEFAULT_ROOT_NAME,
        on_publish: Callable[[PublishedTree], None] | None = None,
        start_worker: Callable[[Callable[[], None]], None] | None = None,
    ) -> None:
        self.expansion = ExpansionState()
        self.selection = SelectionState()
        self.window_threshold = window_threshold
        self.window_padding = window_padding
        self._scroll_offsets: dict[StructuralPath, int] = {}
        self.loader = LoadCoordinator(
            read_container,
            expansion=self.expansion,
            selection=self.selection,
            on_publish=on_publish,
            root_name=root_name,
            start_worker=start_worker,
        )

    @property
    def tree(self) -> DirectoryEntry:
        return self.loader.published.tree

    @property
    def error(self) -> str | None:
        return self.loader.published.error

    def open(self, ref: object) -> LoadRequest:
        """Start loading ``ref``; window scroll offsets reset with the tree."""
        self._scroll_offsets.clear()
        return self.loader.load(ref)

    def poll(self) -> list[LoadOutcome]:
        return self.loader.poll()

    def wait(self, request: LoadRequest, timeout: float | None = None) -> list[LoadOutcome]:
        """Wait for ``request``'s backend call and apply all queued completions."""
        self.loader.wait(request, timeout)
        return self.loader.poll()

    def toggle(self, path: StructuralPath) -> bool:
        return self.expansion.toggle(path)

    def select_path(self, path: StructuralPath) -> Preview | None:
        """Select the entry at ``path`` in the published tree.

        Unknown paths leave the selection untouched and return ``None``.
        """
        entry = find_entry(self.tree, tuple(path))
        if entry is None:
            return None
        self.selection.select(entry, path)
        return self.selection.preview()

    def preview(self) -> Preview:
        return self.selection.preview()

    def scroll_offset(self, path: StructuralPath) -> int:
        return self._scroll_offsets.get(tuple(path), 0)

    def scroll(self, path: StructuralPath, offset: int) -> None:
        """Set the window scroll offset (in rows) for directory ``path``."""
        self._scroll_offsets[tuple(path)] = max(0, int(offset))

    def scroll_by(self, path: StructuralPath, delta: int) -> None:
        self.scroll(path, self.scroll_offset(path) + delta)

    def visible_rows(self, viewport_rows: int = DEFAULT_VIEWPORT_ROWS) -> list[TreeRow]:
        return build_visible_rows(
            self.tree,
            self.expansion,
            viewport_rows=viewport_rows,
            scroll_offsets=self._scroll_offsets,
            window_threshold=self.window_threshold,
            padding=self.window_padding,
        )


__all__ = ["BrowserSession"]
