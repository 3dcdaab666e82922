"""Tree-view state and projection: expansion, child windowing, row formatting.

Defines ``ExpansionState`` and ``visible_range`` plus the row projection that
combines them into the list of rows a tree pane draws.
"""

from __future__ import annotations

from .expansion import ExpansionState
from .rendering import format_size_label, format_tree_row, format_tree_rows
from .rows import DEFAULT_VIEWPORT_ROWS, TreeRow, build_visible_rows
from .windowing import (
    DEFAULT_WINDOW_PADDING,
    DEFAULT_WINDOW_THRESHOLD,
    VisibleRange,
    clamp_scroll_offset,
    should_window,
    visible_range,
    window_slice,
)

__all__ = [
    "ExpansionState",
    "TreeRow",
    "build_visible_rows",
    "DEFAULT_VIEWPORT_ROWS",
    "DEFAULT_WINDOW_PADDING",
    "DEFAULT_WINDOW_THRESHOLD",
    "VisibleRange",
    "clamp_scroll_offset",
    "should_window",
    "visible_range",
    "window_slice",
    "format_size_label",
    "format_tree_row",
    "format_tree_rows",
]
