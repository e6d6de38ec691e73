"""Tests for the day label helpers."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from notification_feed.utils import (
    INVALID_DATE_LABEL,
    from_epoch_millis,
    resolve_timezone,
    to_date_string,
)


def _ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


@pytest.mark.parametrize(
    ("moment", "expected"),
    [
        (datetime(2026, 10, 19, 0, 0, tzinfo=timezone.utc), "Mon Oct 19 2026"),
        (datetime(2026, 10, 19, 23, 59, tzinfo=timezone.utc), "Mon Oct 19 2026"),
        (datetime(2026, 1, 2, 12, 0, tzinfo=timezone.utc), "Fri Jan 02 2026"),
        (datetime(1970, 1, 1, 0, 0, tzinfo=timezone.utc), "Thu Jan 01 1970"),
    ],
)
def test_to_date_string_formats_calendar_day(moment, expected):
    """Labels mirror the ``Www Mmm DD YYYY`` layout."""

    assert to_date_string(_ms(moment)) == expected


def test_to_date_string_honours_timezone():
    """Day boundaries are computed in the supplied timezone."""

    moment = _ms(datetime(2026, 10, 19, 3, 30, tzinfo=timezone.utc))

    assert to_date_string(moment, timezone(timedelta(hours=-5))) == "Sun Oct 18 2026"
    assert to_date_string(moment, timezone(timedelta(hours=9))) == "Mon Oct 19 2026"


def test_to_date_string_accepts_fractional_milliseconds():
    """Float timestamps are supported."""

    moment = _ms(datetime(2026, 10, 19, 12, tzinfo=timezone.utc)) + 0.5

    assert to_date_string(moment) == "Mon Oct 19 2026"


@pytest.mark.parametrize(
    "value",
    [None, float("nan"), float("inf"), float("-inf"), 1e20, 8.64e15, 10**400, -(10**400)],
)
def test_to_date_string_marks_unusable_timestamps(value):
    """Unusable timestamps yield the invalid label instead of raising."""

    assert to_date_string(value) == INVALID_DATE_LABEL


def test_from_epoch_millis_returns_aware_datetime():
    moment = from_epoch_millis(1_000, timezone.utc)

    assert moment == datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC", timedelta(0)),
        ("", timedelta(0)),
        (None, timedelta(0)),
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+3", timedelta(hours=3)),
        ("utc+0530", timedelta(hours=5, minutes=30)),
        ("UTC+25", timedelta(0)),
        ("GMT-24:00", timedelta(0)),
    ],
)
def test_resolve_timezone_handles_offsets(name, offset):
    """Fixed offsets and UTC aliases resolve without tz database lookups."""

    tz = resolve_timezone(name)

    assert tz.utcoffset(datetime(2026, 10, 19)) == offset


def test_resolve_timezone_falls_back_to_utc(caplog):
    """Unknown names log a warning and resolve to UTC."""

    resolve_timezone.cache_clear()
    with caplog.at_level(logging.WARNING):
        tz = resolve_timezone("Not/AZone")

    assert tz is timezone.utc
    assert "Not/AZone" in caplog.text


def test_resolve_timezone_rejects_out_of_range_offset(caplog):
    """Offsets of a day or more are not valid ``tzinfo`` offsets."""

    resolve_timezone.cache_clear()
    with caplog.at_level(logging.WARNING):
        tz = resolve_timezone("UTC+25")

    assert tz is timezone.utc
    assert "UTC+25" in caplog.text
