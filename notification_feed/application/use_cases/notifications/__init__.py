"""Use cases for building the grouped notification feed."""

from .feed import NotificationFeed
from .grouping import (
    INCOME_GROUP_PREFIX,
    NO_SUBJECT_GROUP_KEY,
    filter_unseen,
    group_notifications,
    group_unseen_notifications,
    is_income_notification,
)

__all__ = [
    "INCOME_GROUP_PREFIX",
    "NO_SUBJECT_GROUP_KEY",
    "NotificationFeed",
    "filter_unseen",
    "group_notifications",
    "group_unseen_notifications",
    "is_income_notification",
]
