"""Latest-request-wins container loading.

Each ``load`` runs the backend read on a worker thread. Workers only enqueue
completions; the owning thread applies them through ``poll``/``complete``,
where a completion whose request id is no longer the latest is dropped
without touching any state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty, Queue

from ..entry_model import DEFAULT_ROOT_NAME, DirectoryEntry, empty_root, normalize
from ..errors import BackendFailure, InvalidEntry, StaleResult
from ..tree_model import ExpansionState
from .selection import SelectionState

logger = logging.getLogger(__name__)

OUTCOME_PUBLISHED = "published"
OUTCOME_FAILED = "failed"
OUTCOME_STALE = "stale"


@dataclass(frozen=True)
class LoadRequest:
    """One issued container read, identified by a monotonically increasing id."""

    request_id: int
    ref: object


@dataclass(frozen=True)
class LoadCompletion:
    """Backend result for one request: raw payload or failure description."""

    request: LoadRequest
    raw: object = None
    failure: str | None = None


@dataclass(frozen=True)
class PublishedTree:
    """Current tree and user-visible error, replaced atomically on publish."""

    tree: DirectoryEntry
    error: str | None = None
    request_id: int = 0


@dataclass(frozen=True)
class LoadOutcome:
    """What applying one completion did: ``published``, ``failed``, or ``stale``."""

    request: LoadRequest
    status: str
    error: str | None = None


def describe_failure(exc: BaseException) -> str:
    """Return the user-visible description for a failed backend call."""
    if isinstance(exc, BackendFailure):
        return exc.reason
    return str(exc) or type(exc).__name__


def _start_daemon_thread(work: Callable[[], None]) -> None:
    worker = threading.Thread(
        target=work,
        name="worldviewer-container-load",
        daemon=True,
    )
    worker.start()


class LoadCoordinator:
    """Issue container reads and publish only the latest request's result."""

    def __init__(
        self,
        read_container: Callable[[object], object],
        *,
        expansion: ExpansionState,
        selection: SelectionState,
        on_publish: Callable[[PublishedTree], None] | None = None,
        root_name: str = DEFAULT_ROOT_NAME,
        start_worker: Callable[[Callable[[], None]], None] | None = None,
    ) -> None:
        self._read_container = read_container
        self._expansion = expansion
        self._selection = selection
        self._on_publish = on_publish
        self._root_name = root_name
        self._start_worker = start_worker or _start_daemon_thread
        self._latest_request_id = 0
        self._completions: Queue[LoadCompletion] = Queue()
        self._done: dict[int, threading.Event] = {}
        self._published = PublishedTree(tree=empty_root(root_name))

    @property
    def published(self) -> PublishedTree:
        return self._published

    @property
    def latest_request_id(self) -> int:
        return self._latest_request_id

    def _worker(self, request: LoadRequest, done: threading.Event) -> None:
        try:
            raw = self._read_container(request.ref)
        except Exception as exc:
            completion = LoadCompletion(request=request, failure=describe_failure(exc))
        else:
            completion = LoadCompletion(request=request, raw=raw)
        self._completions.put(completion)
        done.set()

    def load(self, ref: object) -> LoadRequest:
        """Issue a read for ``ref`` and make it the only request that may publish.

        Selection and expansion are reset here, on issue, because the next
        tree's paths bear no relation to the current one.
        """
        self._latest_request_id += 1
        request = LoadRequest(request_id=self._latest_request_id, ref=ref)
        self._selection.clear()
        self._expansion.reset()
        done = threading.Event()
        self._done[request.request_id] = done
        logger.debug("issuing container load %d for %r", request.request_id, ref)
        self._start_worker(lambda: self._worker(request, done))
        return request

    def ensure_current(self, request: LoadRequest) -> None:
        """Raise ``StaleResult`` when ``request`` has been superseded."""
        if request.request_id != self._latest_request_id:
            raise StaleResult(request.request_id, self._latest_request_id)

    def _publish(self, published: PublishedTree) -> None:
        self._published = published
        if self._on_publish is not None:
            self._on_publish(published)

    def _publish_failure(self, request: LoadRequest, reason: str) -> LoadOutcome:
        logger.warning("container load %d failed: %s", request.request_id, reason)
        self._publish(
            PublishedTree(
                tree=empty_root(self._root_name),
                error=reason,
                request_id=request.request_id,
            )
        )
        return LoadOutcome(request=request, status=OUTCOME_FAILED, error=reason)

    def complete(
        self,
        request: LoadRequest,
        raw: object = None,
        failure: str | None = None,
    ) -> LoadOutcome:
        """Apply one backend completion on the owning thread."""
        self._done.pop(request.request_id, None)
        try:
            self.ensure_current(request)
        except StaleResult as exc:
            logger.debug("discarding stale container load: %s", exc)
            return LoadOutcome(request=request, status=OUTCOME_STALE)

        if failure is not None:
            return self._publish_failure(request, failure)
        try:
            tree = normalize(raw, root_name=self._root_name)
        except InvalidEntry as exc:
            return self._publish_failure(request, str(exc))
        if tree.name != self._root_name:
            # Published trees are always addressed from the configured root name.
            tree = DirectoryEntry(name=self._root_name, children=tree.children)

        self._publish(PublishedTree(tree=tree, error=None, request_id=request.request_id))
        logger.debug("published container load %d", request.request_id)
        return LoadOutcome(request=request, status=OUTCOME_PUBLISHED)

    def poll(self) -> list[LoadOutcome]:
        """Apply all queued completions in arrival order."""
        outcomes: list[LoadOutcome] = []
        while True:
            try:
                completion = self._completions.get_nowait()
            except Empty:
                break
            outcomes.append(self.complete(completion.request, completion.raw, completion.failure))
        return outcomes

    def wait(self, request: LoadRequest, timeout: float | None = None) -> bool:
        """Block until ``request``'s backend call has finished (not applied)."""
        done = self._done.get(request.request_id)
        if done is None:
            return True
        return done.wait(timeout)


__all__ = [
    "OUTCOME_PUBLISHED",
    "OUTCOME_FAILED",
    "OUTCOME_STALE",
    "LoadRequest",
    "LoadCompletion",
    "PublishedTree",
    "LoadOutcome",
    "describe_failure",
    "LoadCoordinator",
]
