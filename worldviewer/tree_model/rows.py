"""Flatten an entry tree into the rows a tree pane displays."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..entry_model import DirectoryEntry, Entry, StructuralPath
from .expansion import ExpansionState
from .windowing import (
    DEFAULT_WINDOW_PADDING,
    DEFAULT_WINDOW_THRESHOLD,
    should_window,
    visible_range,
    window_slice,
)

DEFAULT_VIEWPORT_ROWS = 20


@dataclass(frozen=True)
class TreeRow:
    """One rendered row: an entry, or a ``gap`` placeholder for windowed-out children."""

    path: StructuralPath
    depth: int
    entry: Entry | None = None
    kind: str = "entry"
    hidden: int = 0

    @property
    def is_dir(self) -> bool:
        return isinstance(self.entry, DirectoryEntry)


def build_visible_rows(
    tree: DirectoryEntry,
    expansion: ExpansionState,
    *,
    viewport_rows: int = DEFAULT_VIEWPORT_ROWS,
    scroll_offsets: Mapping[StructuralPath, int] | None = None,
    window_threshold: int = DEFAULT_WINDOW_THRESHOLD,
    padding: int = DEFAULT_WINDOW_PADDING,
) -> list[TreeRow]:
    """Build the visible row list honoring expansion and child windowing.

    The root row is always present and always expanded. Children of a
    windowed directory are limited to the visible range for that directory's
    scroll offset, with ``gap`` rows reporting how many rows are hidden above
    and below.
    """
    offsets = scroll_offsets or {}
    root_path = (tree.name,)
    rows: list[TreeRow] = [TreeRow(root_path, 0, tree)]

    def walk(directory: DirectoryEntry, path: StructuralPath, depth: int) -> None:
        """Depth-first traversal adding visible children for expanded directories."""
        children = directory.children
        if should_window(path, len(children), window_threshold):
            visible = visible_range(
                children,
                viewport_rows,
                1,
                offsets.get(path, 0),
                padding=padding,
            )
            if visible.hidden_before:
                rows.append(TreeRow(path, depth, kind="gap", hidden=visible.hidden_before))
            shown = window_slice(children, visible)
            hidden_after = visible.hidden_after(len(children))
        else:
            shown = children
            hidden_after = 0

        for child in shown:
            child_path = (*path, child.name)
            rows.append(TreeRow(child_path, depth, child))
            if isinstance(child, DirectoryEntry) and expansion.is_expanded(child_path):
                walk(child, child_path, depth + 1)
        if hidden_after:
            rows.append(TreeRow(path, depth, kind="gap", hidden=hidden_after))

    walk(tree, root_path, 1)
    return rows


__all__ = [
    "DEFAULT_VIEWPORT_ROWS",
    "TreeRow",
    "build_visible_rows",
]
