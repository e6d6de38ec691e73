"""Endpoints and websocket handler for the grouped notification feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status

from notification_feed.application.use_cases.notifications import NotificationFeed
from notification_feed.domain.entities import NotificationGroup, NotificationRecord
from notification_feed.infrastructure.notifications import (
    NotificationSnapshotStore,
    build_groups_message,
    dispatch_grouped_notifications,
    feed_subscriptions,
)
from notification_feed.interfaces.api.dependencies import (
    get_notification_feed,
    get_notification_store,
)
from notification_feed.interfaces.api.schemas import (
    NotificationGroupRead,
    NotificationRead,
    NotificationRecordPayload,
    NotificationSnapshotAccepted,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])

_NOT_READY_DETAIL = "No notifications have been published for this user yet"


def _require(value, user_id: str):
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{_NOT_READY_DETAIL}: {user_id}",
        )
    return value


def _records_to_schema(records: list[NotificationRecord]) -> list[NotificationRead]:
    return [NotificationRead.from_entity(record) for record in records]


def _groups_to_schema(
    groups: tuple[NotificationGroup, ...],
) -> list[NotificationGroupRead]:
    return [NotificationGroupRead.from_entity(group) for group in groups]


@router.put("/{user_id}", response_model=NotificationSnapshotAccepted)
async def replace_notifications(
    user_id: str,
    records: list[NotificationRecordPayload],
    store: NotificationSnapshotStore = Depends(get_notification_store),
    feed: NotificationFeed = Depends(get_notification_feed),
) -> NotificationSnapshotAccepted:
    """Replace the full notification list of ``user_id`` and notify subscribers."""

    snapshot = store.publish(user_id, [record.to_entity() for record in records])
    if feed_subscriptions.subscriber_count(user_id):
        grouped = await feed.refresh(snapshot)
        if grouped is not None:
            dispatch_grouped_notifications(grouped)
    return NotificationSnapshotAccepted(
        user_id=user_id, sequence=snapshot.sequence, count=len(snapshot.records)
    )


@router.get("/{user_id}", response_model=list[NotificationRead])
def list_notifications(
    user_id: str, feed: NotificationFeed = Depends(get_notification_feed)
) -> list[NotificationRead]:
    """Return every notification of ``user_id`` as last published."""

    return _records_to_schema(_require(feed.notifications(user_id), user_id))


@router.get("/{user_id}/unseen", response_model=list[NotificationRead])
def list_unseen_notifications(
    user_id: str, feed: NotificationFeed = Depends(get_notification_feed)
) -> list[NotificationRead]:
    """Return the notifications ``user_id`` has not seen yet."""

    return _records_to_schema(_require(feed.unseen_notifications(user_id), user_id))


@router.get("/{user_id}/groups", response_model=list[NotificationGroupRead])
def list_notification_groups(
    user_id: str, feed: NotificationFeed = Depends(get_notification_feed)
) -> list[NotificationGroupRead]:
    """Return the grouped feed for ``user_id``."""

    return _groups_to_schema(_require(feed.grouped_notifications(user_id), user_id))


@router.get("/{user_id}/unseen/groups", response_model=list[NotificationGroupRead])
def list_unseen_notification_groups(
    user_id: str, feed: NotificationFeed = Depends(get_notification_feed)
) -> list[NotificationGroupRead]:
    """Return the grouped feed restricted to unseen notifications."""

    groups = feed.unseen_grouped_notifications(user_id)
    return _groups_to_schema(_require(groups, user_id))


@router.websocket("/{user_id}/ws")
async def notifications_websocket(
    websocket: WebSocket,
    user_id: str,
    store: NotificationSnapshotStore = Depends(get_notification_store),
    feed: NotificationFeed = Depends(get_notification_feed),
) -> None:
    """Websocket endpoint that streams grouped notifications to ``user_id``."""

    await feed_subscriptions.subscribe(user_id, websocket)
    try:
        snapshot = store.latest(user_id)
        # A stale result is superseded by the push of the newer snapshot.
        grouped = await feed.refresh(snapshot) if snapshot is not None else None
        if grouped is not None:
            await feed_subscriptions.send_initial(
                user_id, websocket, grouped.sequence, build_groups_message(grouped, "init")
            )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                continue

            if isinstance(message, dict) and message.get("type") == "ping":
                await websocket.send_json({"type": "pong"})
    except WebSocketDisconnect:
        feed_subscriptions.unsubscribe(user_id, websocket)
    except Exception:  # pragma: no cover - defensive path
        feed_subscriptions.unsubscribe(user_id, websocket)
        raise


__all__ = ["router"]
