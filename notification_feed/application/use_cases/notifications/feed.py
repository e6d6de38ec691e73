"""Read models over the latest notification snapshot of each user."""

from __future__ import annotations

import logging
from collections.abc import Collection
from datetime import timezone, tzinfo
from functools import partial

from anyio import to_thread

from notification_feed.domain.entities import (
    DEFAULT_INCOME_SOURCE_TYPES,
    GroupedSnapshot,
    NotificationGroup,
    NotificationRecord,
    NotificationSnapshot,
)
from notification_feed.infrastructure.notifications import NotificationSnapshotStore

from .grouping import filter_unseen, group_notifications, group_unseen_notifications

logger = logging.getLogger(__name__)


class NotificationFeed:
    """Expose a user's notifications, raw or grouped, from the snapshot store.

    Every accessor returns ``None`` while no snapshot has been published for
    the user, so callers can tell "no data yet" apart from an empty feed.
    """

    def __init__(
        self,
        store: NotificationSnapshotStore,
        *,
        tz: tzinfo = timezone.utc,
        income_source_types: Collection[str] = DEFAULT_INCOME_SOURCE_TYPES,
    ) -> None:
        self._store = store
        self._tz = tz
        self._income_source_types = frozenset(income_source_types)

    def notifications(self, user_id: str) -> list[NotificationRecord] | None:
        snapshot = self._store.latest(user_id)
        if snapshot is None:
            return None
        return list(snapshot.records)

    def unseen_notifications(self, user_id: str) -> list[NotificationRecord] | None:
        snapshot = self._store.latest(user_id)
        if snapshot is None:
            return None
        return filter_unseen(snapshot.records)

    def grouped_notifications(
        self, user_id: str
    ) -> tuple[NotificationGroup, ...] | None:
        snapshot = self._store.latest(user_id)
        if snapshot is None:
            return None
        return self._group(snapshot, unseen_only=False)

    def unseen_grouped_notifications(
        self, user_id: str
    ) -> tuple[NotificationGroup, ...] | None:
        snapshot = self._store.latest(user_id)
        if snapshot is None:
            return None
        return self._group(snapshot, unseen_only=True)

    async def refresh(
        self, snapshot: NotificationSnapshot, *, unseen_only: bool = False
    ) -> GroupedSnapshot | None:
        """Group ``snapshot`` off the event loop.

        Returns ``None`` when a newer snapshot was published for the same user
        before the computation finished; only the latest result is observable.
        """

        groups = await to_thread.run_sync(
            partial(self._group, snapshot, unseen_only=unseen_only)
        )
        if not self._store.is_latest(snapshot):
            logger.debug(
                "Discarding groups for stale snapshot %s of user %s",
                snapshot.sequence,
                snapshot.user_id,
            )
            return None
        return GroupedSnapshot(
            user_id=snapshot.user_id, sequence=snapshot.sequence, groups=groups
        )

    def _group(
        self, snapshot: NotificationSnapshot, *, unseen_only: bool
    ) -> tuple[NotificationGroup, ...]:
        grouper = group_unseen_notifications if unseen_only else group_notifications
        return grouper(
            snapshot.records, tz=self._tz, income_source_types=self._income_source_types
        )


__all__ = ["NotificationFeed"]
