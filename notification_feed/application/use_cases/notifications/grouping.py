"""Collapse a user's notifications into display groups for the feed."""

from __future__ import annotations

import math
from collections.abc import Collection, Iterable, Iterator, Sequence
from datetime import timezone, tzinfo
from itertools import chain

from notification_feed.domain.entities import (
    DEFAULT_INCOME_SOURCE_TYPES,
    GROUP_CATEGORY_INCOME,
    GROUP_CATEGORY_NORMAL,
    NotificationGroup,
    NotificationRecord,
)
from notification_feed.utils import to_date_string

INCOME_GROUP_PREFIX = "income"
NO_SUBJECT_GROUP_KEY = ""


def group_notifications(
    records: Iterable[NotificationRecord],
    *,
    tz: tzinfo = timezone.utc,
    income_source_types: Collection[str] = DEFAULT_INCOME_SOURCE_TYPES,
) -> tuple[NotificationGroup, ...]:
    """Return the display groups for ``records``.

    Days are emitted in the order they first appear in ``records``. Within a
    day the income group (if any) comes first, followed by one group per
    ``source_contract_id`` in first-appearance order. Records without a
    contract id share a single group keyed by the empty string.
    """

    days = _partition(records, lambda record: to_date_string(record.created_time, tz))
    return tuple(
        chain.from_iterable(
            _groups_for_day(day, day_records, income_source_types)
            for day, day_records in days.items()
        )
    )


def filter_unseen(records: Iterable[NotificationRecord]) -> list[NotificationRecord]:
    """Return the records the user has not seen yet, keeping their order."""

    return [record for record in records if not record.is_seen]


def group_unseen_notifications(
    records: Iterable[NotificationRecord],
    *,
    tz: tzinfo = timezone.utc,
    income_source_types: Collection[str] = DEFAULT_INCOME_SOURCE_TYPES,
) -> tuple[NotificationGroup, ...]:
    """Group only the unseen subset of ``records``."""

    return group_notifications(
        filter_unseen(records), tz=tz, income_source_types=income_source_types
    )


def is_income_notification(
    record: NotificationRecord,
    income_source_types: Collection[str] = DEFAULT_INCOME_SOURCE_TYPES,
) -> bool:
    return (record.source_type or "") in income_source_types


def _groups_for_day(
    day: str,
    records: Sequence[NotificationRecord],
    income_source_types: Collection[str],
) -> Iterator[NotificationGroup]:
    income = [r for r in records if is_income_notification(r, income_source_types)]
    normal = [r for r in records if not is_income_notification(r, income_source_types)]

    if income:
        yield NotificationGroup(
            group_key=INCOME_GROUP_PREFIX + day,
            time_period=day,
            category=GROUP_CATEGORY_INCOME,
            notifications=tuple(income),
            is_any_seen=income[0].is_seen,
        )

    by_subject = _partition(
        normal, lambda record: record.source_contract_id or NO_SUBJECT_GROUP_KEY
    )
    for subject_id, members in by_subject.items():
        ordered = tuple(sorted(members, key=_newest_first_key, reverse=True))
        yield NotificationGroup(
            group_key=subject_id,
            time_period=day,
            category=GROUP_CATEGORY_NORMAL,
            notifications=ordered,
            is_any_seen=any(not member.is_seen for member in ordered),
        )


def _partition(records, key) -> dict[str, list[NotificationRecord]]:
    # dicts keep insertion order, so keys follow first appearance.
    buckets: dict[str, list[NotificationRecord]] = {}
    for record in records:
        buckets.setdefault(key(record), []).append(record)
    return buckets


def _newest_first_key(record: NotificationRecord) -> float:
    if record.created_time is None:
        return -math.inf
    try:
        value = float(record.created_time)
    except OverflowError:
        return -math.inf
    return -math.inf if math.isnan(value) else value


__all__ = [
    "INCOME_GROUP_PREFIX",
    "NO_SUBJECT_GROUP_KEY",
    "filter_unseen",
    "group_notifications",
    "group_unseen_notifications",
    "is_income_notification",
]
