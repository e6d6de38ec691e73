from .notification import (
    NotificationGroupRead,
    NotificationRead,
    NotificationRecordPayload,
    NotificationSnapshotAccepted,
)

__all__ = [
    "NotificationGroupRead",
    "NotificationRead",
    "NotificationRecordPayload",
    "NotificationSnapshotAccepted",
]
