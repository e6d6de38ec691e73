"""Utility helpers for reusable functionality."""

from .datetime import (
    INVALID_DATE_LABEL,
    from_epoch_millis,
    resolve_timezone,
    to_date_string,
)

__all__ = [
    "INVALID_DATE_LABEL",
    "from_epoch_millis",
    "resolve_timezone",
    "to_date_string",
]
