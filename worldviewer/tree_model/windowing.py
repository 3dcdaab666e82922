"""Visible-range arithmetic for very large directory child lists.

The record directory can hold tens of thousands of keys. Only the rows that
cover the viewport (plus a small padding) are ever turned into renderable
rows; range computation is index arithmetic on ``len(children)`` and never
iterates the children.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from ..entry_model import StructuralPath, is_record_collection

DEFAULT_WINDOW_THRESHOLD = 50
DEFAULT_WINDOW_PADDING = 1

T = TypeVar("T")


@dataclass(frozen=True)
class VisibleRange:
    """Half-open ``[start, end)`` slice plus the full scroll extent."""

    start: int
    end: int
    total_extent: int

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def hidden_before(self) -> int:
        return self.start

    def hidden_after(self, total: int) -> int:
        return max(0, total - self.end)


def clamp_scroll_offset(scroll_offset: int, total_extent: int, viewport_height: int) -> int:
    """Clamp ``scroll_offset`` into ``[0, total_extent - viewport_height]``."""
    max_offset = max(0, total_extent - max(0, viewport_height))
    return max(0, min(scroll_offset, max_offset))


def visible_range(
    children: Sequence[object],
    viewport_height: int,
    row_height: int,
    scroll_offset: int,
    padding: int = DEFAULT_WINDOW_PADDING,
) -> VisibleRange:
    """Return the minimal child slice covering the viewport.

    ``end - start`` never exceeds ``ceil(viewport_height / row_height) +
    2 * padding``, except that a partially visible bottom row is always
    included, so a zero padding may add one row when ``scroll_offset`` is not
    row-aligned.
    """
    if row_height <= 0:
        raise ValueError("row_height must be >= 1")
    total = len(children)
    total_extent = total * row_height
    if viewport_height <= 0 or total == 0:
        return VisibleRange(0, 0, total_extent)

    padding = max(0, padding)
    offset = clamp_scroll_offset(scroll_offset, total_extent, viewport_height)
    first = offset // row_height
    capacity = -(-viewport_height // row_height)
    start = max(0, first - padding)
    # Without padding an unaligned offset still needs the partial bottom row.
    last_visible = -(-(offset + viewport_height) // row_height)
    end = min(total, max(first + capacity + padding, last_visible))
    return VisibleRange(start, end, total_extent)


def window_slice(children: Sequence[T], visible: VisibleRange) -> Sequence[T]:
    """Return only the children inside ``visible``."""
    return children[visible.start : visible.end]


def should_window(
    path: StructuralPath,
    child_count: int,
    threshold: int = DEFAULT_WINDOW_THRESHOLD,
) -> bool:
    """Return whether a directory's children render through a window.

    The record directory always windows; other directories only when their
    child count exceeds ``threshold``.
    """
    if is_record_collection(path):
        return True
    return child_count > threshold


__all__ = [
    "DEFAULT_WINDOW_THRESHOLD",
    "DEFAULT_WINDOW_PADDING",
    "VisibleRange",
    "clamp_scroll_offset",
    "visible_range",
    "window_slice",
    "should_window",
]
