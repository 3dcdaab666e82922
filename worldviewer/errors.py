"""Exception hierarchy for worldviewer.

``BackendFailure`` and ``InvalidEntry`` terminate at the load-coordinator
boundary and become the published error string. ``StaleResult`` never reaches
the user; the coordinator uses it to discard superseded completions.
"""

from __future__ import annotations


class WorldViewerError(Exception):
    """Base class for all custom errors raised by worldviewer."""


class BackendFailure(WorldViewerError):
    """Raised when a container read request fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidEntry(WorldViewerError):
    """Raised when a raw entry cannot become a canonical tree entry."""

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        if path:
            message = f"{message} (at {'/'.join(path)})"
        super().__init__(message)
        self.path = path


class StaleResult(WorldViewerError):
    """Raised when a completion belongs to a superseded load request."""

    def __init__(self, request_id: int, latest_request_id: int) -> None:
        super().__init__(f"request {request_id} superseded by {latest_request_id}")
        self.request_id = request_id
        self.latest_request_id = latest_request_id


__all__ = [
    "WorldViewerError",
    "BackendFailure",
    "InvalidEntry",
    "StaleResult",
]
