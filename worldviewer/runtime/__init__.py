"""Runtime state owners: container loading, selection, and the browser session."""

from __future__ import annotations

from .load_coordinator import (
    OUTCOME_FAILED,
    OUTCOME_PUBLISHED,
    OUTCOME_STALE,
    LoadCompletion,
    LoadCoordinator,
    LoadOutcome,
    LoadRequest,
    PublishedTree,
    describe_failure,
)
from .selection import DIRECTORY_PREVIEW_TEXT, NO_SELECTION_TEXT, Preview, SelectionState, build_preview
from .session import BrowserSession

__all__ = [
    "OUTCOME_FAILED",
    "OUTCOME_PUBLISHED",
    "OUTCOME_STALE",
    "LoadCompletion",
    "LoadCoordinator",
    "LoadOutcome",
    "LoadRequest",
    "PublishedTree",
    "describe_failure",
    "DIRECTORY_PREVIEW_TEXT",
    "NO_SELECTION_TEXT",
    "Preview",
    "SelectionState",
    "build_preview",
    "BrowserSession",
]
