"""Display-facing cluster of notifications produced by the grouping engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

from .notification import NotificationRecord

GROUP_CATEGORY_INCOME: Final = "income"
GROUP_CATEGORY_NORMAL: Final = "normal"

GroupCategory = Literal["income", "normal"]


@dataclass(frozen=True)
class NotificationGroup:
    """Notifications sharing a day, a category and, for normal groups, a subject.

    ``is_any_seen`` follows two different rules depending on ``category``:

    * ``normal`` groups report ``True`` when at least one member is unseen.
    * ``income`` groups copy the ``is_seen`` flag of their first member, so an
      unread badge driven by income groups may undercount.
    """

    group_key: str
    time_period: str
    category: GroupCategory
    notifications: tuple[NotificationRecord, ...]
    is_any_seen: bool


__all__ = [
    "GROUP_CATEGORY_INCOME",
    "GROUP_CATEGORY_NORMAL",
    "GroupCategory",
    "NotificationGroup",
]
