"""Versioned views of a user's notification list."""

from __future__ import annotations

from dataclasses import dataclass

from .notification import NotificationRecord
from .notification_group import NotificationGroup


@dataclass(frozen=True)
class NotificationSnapshot:
    """Full replacement list of records published for ``user_id``."""

    user_id: str
    sequence: int
    records: tuple[NotificationRecord, ...]


@dataclass(frozen=True)
class GroupedSnapshot:
    """Groups computed from the snapshot identified by ``sequence``."""

    user_id: str
    sequence: int
    groups: tuple[NotificationGroup, ...]


__all__ = ["NotificationSnapshot", "GroupedSnapshot"]
