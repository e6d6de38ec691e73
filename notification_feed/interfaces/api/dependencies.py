"""FastAPI dependency utilities."""

from fastapi import Depends

from notification_feed.application.use_cases.notifications import NotificationFeed
from notification_feed.config import Settings, get_settings
from notification_feed.infrastructure.notifications import (
    NotificationSnapshotStore,
    notification_store,
)
from notification_feed.utils import resolve_timezone


def get_notification_store() -> NotificationSnapshotStore:
    """Return the process-wide snapshot store."""

    return notification_store


def get_notification_feed(
    store: NotificationSnapshotStore = Depends(get_notification_store),
    settings: Settings = Depends(get_settings),
) -> NotificationFeed:
    """Build the feed configured with the application timezone and income tags."""

    return NotificationFeed(
        store,
        tz=resolve_timezone(settings.app_timezone),
        income_source_types=settings.income_source_types(),
    )
