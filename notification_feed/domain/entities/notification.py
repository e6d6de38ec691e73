"""Domain entity representing a notification delivered to a user."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

DEFAULT_INCOME_SOURCE_TYPES: Final[frozenset[str]] = frozenset(
    {
        "bonus",
        "tip",
        "loan",
        "betting_streak_bonus",
        "tip_and_like",
    }
)


@dataclass(frozen=True)
class NotificationRecord:
    """Single notification as delivered by the upstream data source.

    ``created_time`` is expressed in epoch milliseconds. Records without a
    usable timestamp are accepted but land in the ``"Invalid Date"`` day.
    """

    id: str
    created_time: int | float | None
    is_seen: bool = False
    source_type: str | None = None
    source_contract_id: str | None = None
    user_id: str | None = None
    reason: str | None = None
    source_user_name: str | None = None
    source_text: str | None = None
    source_contract_title: str | None = None


__all__ = ["DEFAULT_INCOME_SOURCE_TYPES", "NotificationRecord"]
