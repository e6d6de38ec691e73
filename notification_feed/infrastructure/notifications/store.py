"""In-memory source of the latest notification snapshot for each user."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from itertools import count

from notification_feed.domain.entities import NotificationRecord, NotificationSnapshot

logger = logging.getLogger(__name__)


class NotificationSnapshotStore:
    """Keep the most recent full list of notifications per user.

    Every publication replaces the previous snapshot and receives a sequence
    number from a counter shared by all users, so a larger number always
    means a newer snapshot.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sequence = count(1)
        self._snapshots: dict[str, NotificationSnapshot] = {}

    def publish(
        self, user_id: str, records: Iterable[NotificationRecord]
    ) -> NotificationSnapshot:
        """Replace the snapshot for ``user_id`` with ``records``."""

        frozen = tuple(records)
        with self._lock:
            snapshot = NotificationSnapshot(
                user_id=user_id, sequence=next(self._sequence), records=frozen
            )
            self._snapshots[user_id] = snapshot
        logger.debug(
            "Published snapshot %s for user %s with %s notifications",
            snapshot.sequence,
            user_id,
            len(frozen),
        )
        return snapshot

    def latest(self, user_id: str) -> NotificationSnapshot | None:
        """Return the current snapshot for ``user_id`` or ``None`` if none exists."""

        with self._lock:
            return self._snapshots.get(user_id)

    def is_latest(self, snapshot: NotificationSnapshot) -> bool:
        """Return whether ``snapshot`` is still the newest one for its user."""

        current = self.latest(snapshot.user_id)
        return current is not None and current.sequence == snapshot.sequence

    def clear(self, user_id: str | None = None) -> None:
        """Drop the snapshot for ``user_id`` or every snapshot when omitted."""

        with self._lock:
            if user_id is None:
                self._snapshots.clear()
            else:
                self._snapshots.pop(user_id, None)


notification_store = NotificationSnapshotStore()


__all__ = ["NotificationSnapshotStore", "notification_store"]
