"""Utility helpers to push grouped notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Any

from anyio import from_thread

from notification_feed.domain.entities import (
    GroupedSnapshot,
    NotificationGroup,
    NotificationRecord,
)

from .manager import FeedSubscriptionManager, feed_subscriptions


class GroupedNotificationPublisher:
    """Serialize grouped snapshots and schedule their delivery."""

    def __init__(self, manager: FeedSubscriptionManager) -> None:
        self._manager = manager
        self._pending: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def dispatch(self, grouped: GroupedSnapshot) -> None:
        """Schedule ``grouped`` to be delivered to its user."""

        message = build_groups_message(grouped)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            from_thread.run(self._manager.push, grouped.user_id, grouped.sequence, message)
        else:
            task = loop.create_task(
                self._manager.push(grouped.user_id, grouped.sequence, message)
            )
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def flush(self) -> None:
        """Wait for every scheduled delivery to finish."""

        if self._pending:
            await asyncio.gather(*self._pending)


def build_groups_message(grouped: GroupedSnapshot, kind: str = "groups") -> dict[str, Any]:
    return {
        "type": kind,
        "sequence": grouped.sequence,
        "data": serialize_groups(grouped.groups),
    }


def serialize_record(record: NotificationRecord) -> dict[str, Any]:
    """Return the JSON payload representation for ``record``."""

    return {
        "id": record.id,
        "created_time": record.created_time,
        "is_seen": record.is_seen,
        "source_type": record.source_type,
        "source_contract_id": record.source_contract_id,
        "user_id": record.user_id,
        "reason": record.reason,
        "source_user_name": record.source_user_name,
        "source_text": record.source_text,
        "source_contract_title": record.source_contract_title,
    }


def serialize_group(group: NotificationGroup) -> dict[str, Any]:
    """Return the JSON payload representation for ``group``."""

    return {
        "group_key": group.group_key,
        "time_period": group.time_period,
        "category": group.category,
        "is_any_seen": group.is_any_seen,
        "notifications": [serialize_record(record) for record in group.notifications],
    }


def serialize_groups(groups: Iterable[NotificationGroup]) -> list[dict[str, Any]]:
    return [serialize_group(group) for group in groups]


grouped_notification_publisher = GroupedNotificationPublisher(feed_subscriptions)


def dispatch_grouped_notifications(grouped: GroupedSnapshot) -> None:
    """Public helper that delegates to the shared publisher instance."""

    grouped_notification_publisher.dispatch(grouped)


__all__ = [
    "GroupedNotificationPublisher",
    "build_groups_message",
    "grouped_notification_publisher",
    "dispatch_grouped_notifications",
    "serialize_group",
    "serialize_groups",
    "serialize_record",
]
