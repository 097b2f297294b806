"""Entity store — owner of every business record and the session identity."""

import logging
from collections.abc import Callable

from dashboard.domain.entities import StoreSnapshot

logger = logging.getLogger(__name__)

StoreListener = Callable[[StoreSnapshot, int], None]


class EntityStore:
    """Holds the current snapshot and accepts whole-snapshot replacement.

    There is no partial update: mutation handlers compute the next
    snapshot and the caller hands it to ``replace``. Each replacement bumps
    ``revision`` and notifies listeners so dependent views are re-derived.
    """

    def __init__(self, snapshot: StoreSnapshot | None = None):
        self._snapshot = snapshot or StoreSnapshot()
        self._revision = 0
        self._listeners: list[StoreListener] = []

    @property
    def snapshot(self) -> StoreSnapshot:
        return self._snapshot

    @property
    def revision(self) -> int:
        return self._revision

    def replace(self, snapshot: StoreSnapshot) -> None:
        self._snapshot = snapshot
        self._revision += 1
        logger.debug(
            "Store replaced (revision=%d, clients=%d, projects=%d, invoices=%d, users=%d)",
            self._revision,
            len(snapshot.clients),
            len(snapshot.projects),
            len(snapshot.invoices),
            len(snapshot.users),
        )
        for listener in list(self._listeners):
            listener(snapshot, self._revision)

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
