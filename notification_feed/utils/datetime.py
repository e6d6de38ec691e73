"""Helpers for turning notification timestamps into calendar days."""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


logger = logging.getLogger(__name__)

INVALID_DATE_LABEL: Final[str] = "Invalid Date"

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
_WEEKDAY_NAMES: Final[tuple[str, ...]] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=32)
def resolve_timezone(tz_name: str | None) -> tzinfo:
    """Resolve ``tz_name`` into a ``tzinfo`` instance.

    Accepts IANA names (``Europe/Madrid``) and fixed offsets (``UTC-05:00``).
    Names that cannot be resolved fall back to UTC.
    """

    name = (tz_name or "").strip()
    if not name or name.upper() in {"UTC", "GMT", "Z"}:
        return timezone.utc

    match = _OFFSET_PATTERN.match(name)
    if match:
        sign = -1 if match.group("sign") == "-" else 1
        hours = int(match.group("hours"))
        minutes = int(match.group("minutes") or 0)
        try:
            return timezone(sign * timedelta(hours=hours, minutes=minutes))
        except ValueError:
            logger.warning("Timezone offset %r out of range; falling back to UTC", name)
            return timezone.utc

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r; falling back to UTC", name)
        return timezone.utc


def from_epoch_millis(value: int | float, tz: tzinfo) -> datetime:
    """Return the aware datetime for ``value`` milliseconds since the epoch."""

    return (_EPOCH + timedelta(milliseconds=value)).astimezone(tz)


def to_date_string(created_time: int | float | None, tz: tzinfo = timezone.utc) -> str:
    """Render the calendar day of ``created_time`` as ``"Mon Oct 19 2026"``.

    Names are always English so labels do not depend on the process locale.
    Missing or unrepresentable timestamps produce :data:`INVALID_DATE_LABEL`.
    """

    if created_time is None:
        return INVALID_DATE_LABEL
    try:
        if not math.isfinite(float(created_time)):
            return INVALID_DATE_LABEL
        moment = from_epoch_millis(created_time, tz)
    except OverflowError:
        return INVALID_DATE_LABEL

    return (
        f"{_WEEKDAY_NAMES[moment.weekday()]} {_MONTH_NAMES[moment.month - 1]} "
        f"{moment.day:02d} {moment.year:04d}"
    )


__all__ = [
    "INVALID_DATE_LABEL",
    "from_epoch_millis",
    "resolve_timezone",
    "to_date_string",
]
