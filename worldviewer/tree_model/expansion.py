"""Path-keyed expand/collapse state for directory rows."""

from __future__ import annotations

from ..entry_model import StructuralPath


class ExpansionState:
    """Set of structural paths whose directories are open.

    Transitions never consult tree content, so toggling a path that is not (or
    no longer) in the current tree only changes membership. Root paths are
    always expanded and ignore toggles.
    """

    def __init__(self) -> None:
        self._expanded: set[StructuralPath] = set()

    def is_expanded(self, path: StructuralPath) -> bool:
        if not path:
            return False
        if len(path) == 1:
            return True
        return tuple(path) in self._expanded

    def toggle(self, path: StructuralPath) -> bool:
        """Flip ``path`` membership and return the new expanded flag."""
        key = tuple(path)
        if len(key) <= 1:
            return self.is_expanded(key)
        if key in self._expanded:
            self._expanded.discard(key)
            return False
        self._expanded.add(key)
        return True

    def expand(self, path: StructuralPath) -> None:
        key = tuple(path)
        if len(key) > 1:
            self._expanded.add(key)

    def collapse(self, path: StructuralPath) -> None:
        self._expanded.discard(tuple(path))

    def reset(self) -> None:
        """Collapse everything; called whenever a new container load is issued."""
        self._expanded.clear()

    @property
    def expanded_paths(self) -> frozenset[StructuralPath]:
        return frozenset(self._expanded)

    def __len__(self) -> int:
        return len(self._expanded)


__all__ = ["ExpansionState"]
