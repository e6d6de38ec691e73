"""Domain entities exposed by the application."""

from .notification import DEFAULT_INCOME_SOURCE_TYPES, NotificationRecord
from .notification_group import (
    GROUP_CATEGORY_INCOME,
    GROUP_CATEGORY_NORMAL,
    GroupCategory,
    NotificationGroup,
)
from .notification_snapshot import GroupedSnapshot, NotificationSnapshot

__all__ = [
    "DEFAULT_INCOME_SOURCE_TYPES",
    "NotificationRecord",
    "GROUP_CATEGORY_INCOME",
    "GROUP_CATEGORY_NORMAL",
    "GroupCategory",
    "NotificationGroup",
    "NotificationSnapshot",
    "GroupedSnapshot",
]
