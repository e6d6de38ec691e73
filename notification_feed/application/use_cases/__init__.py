"""Aggregate application use cases."""

from .notifications import (
    NotificationFeed,
    group_notifications,
    group_unseen_notifications,
)

__all__ = [
    "NotificationFeed",
    "group_notifications",
    "group_unseen_notifications",
]
