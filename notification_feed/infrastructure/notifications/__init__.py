"""Notification data source and realtime helpers for the infrastructure layer."""

from .manager import FeedSubscriptionManager, feed_subscriptions
from .publisher import (
    GroupedNotificationPublisher,
    build_groups_message,
    dispatch_grouped_notifications,
    grouped_notification_publisher,
    serialize_group,
    serialize_groups,
    serialize_record,
)
from .store import NotificationSnapshotStore, notification_store

__all__ = [
    "FeedSubscriptionManager",
    "feed_subscriptions",
    "GroupedNotificationPublisher",
    "build_groups_message",
    "grouped_notification_publisher",
    "dispatch_grouped_notifications",
    "serialize_group",
    "serialize_groups",
    "serialize_record",
    "NotificationSnapshotStore",
    "notification_store",
]
