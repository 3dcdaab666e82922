"""Formatting helpers for tree rows and the preview block."""

from __future__ import annotations

from ..entry_model import is_record_collection
from ..ui_theme import DEFAULT_THEME, UITheme
from .expansion import ExpansionState
from .rows import TreeRow


def format_size_label(size: int) -> str:
    """Return a compact human size such as ``128 B`` or ``12 KB``."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size // 1024} KB"
    return f"{size // (1024 * 1024)} MB"


def format_tree_row(
    row: TreeRow,
    expansion: ExpansionState,
    show_size_labels: bool = True,
    theme: UITheme | None = None,
) -> str:
    """Render one tree or gap row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * row.depth
    if row.kind == "gap":
        noun = "entry" if row.hidden == 1 else "entries"
        return f"{indent}  {active_theme.tree_gap}… {row.hidden:,} more {noun}{reset}"

    entry = row.entry
    assert entry is not None
    if row.is_dir:
        marker = "▾ " if expansion.is_expanded(row.path) else "▸ "
        color = active_theme.tree_records_dir if is_record_collection(row.path) else active_theme.tree_dir
        suffix = ""
        if is_record_collection(row.path):
            suffix = f" {active_theme.tree_size}[{len(entry.children):,} records]{reset}"
        return f"{indent}{active_theme.tree_marker}{marker}{reset}{color}{entry.name}/{reset}{suffix}"

    # Align file names under the parent directory arrow column.
    size_label = ""
    if show_size_labels:
        size_label = f"{active_theme.tree_size} [{format_size_label(entry.size)}]{reset}"
    return f"{indent}  {active_theme.tree_file}{entry.name}{reset}{size_label}"


def format_tree_rows(
    rows: list[TreeRow],
    expansion: ExpansionState,
    show_size_labels: bool = True,
    theme: UITheme | None = None,
) -> list[str]:
    return [format_tree_row(row, expansion, show_size_labels, theme) for row in rows]


__all__ = [
    "format_size_label",
    "format_tree_row",
    "format_tree_rows",
]
