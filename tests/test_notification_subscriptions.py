"""Tests for websocket feed subscriptions and the grouped publisher."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

pytest.importorskip("fastapi")

from notification_feed.domain.entities import GroupedSnapshot
from notification_feed.infrastructure.notifications import (
    FeedSubscriptionManager,
    GroupedNotificationPublisher,
)


class RecordingWebSocket:
    def __init__(self, *, fail: bool = False) -> None:
        self.accepted = False
        self.sent: list[dict] = []
        self._fail = fail

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, message: dict) -> None:
        if self._fail:
            raise RuntimeError("connection closed")
        self.sent.append(message)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def manager() -> FeedSubscriptionManager:
    return FeedSubscriptionManager()


@pytest.mark.anyio
async def test_subscribe_accepts_and_counts(manager: FeedSubscriptionManager) -> None:
    websocket = RecordingWebSocket()

    await manager.subscribe("u1", websocket)

    assert websocket.accepted
    assert manager.subscriber_count("u1") == 1
    assert manager.subscriber_count("u2") == 0

    manager.unsubscribe("u1", websocket)
    manager.unsubscribe("u1", websocket)
    assert manager.subscriber_count("u1") == 0


@pytest.mark.anyio
async def test_older_push_after_newer_is_skipped(manager: FeedSubscriptionManager) -> None:
    """A feed computed from an older snapshot never replaces a newer one."""

    websocket = RecordingWebSocket()
    await manager.subscribe("u1", websocket)

    assert await manager.push("u1", 5, {"sequence": 5}) == 1
    assert await manager.push("u1", 3, {"sequence": 3}) == 0
    assert await manager.push("u1", 5, {"sequence": 5}) == 0
    assert await manager.push("u1", 7, {"sequence": 7}) == 1

    assert [message["sequence"] for message in websocket.sent] == [5, 7]
    assert manager.delivered_sequence("u1", websocket) == 7


@pytest.mark.anyio
async def test_initial_feed_is_skipped_when_a_newer_push_arrived_first(
    manager: FeedSubscriptionManager,
) -> None:
    websocket = RecordingWebSocket()
    await manager.subscribe("u1", websocket)
    await manager.push("u1", 9, {"type": "groups", "sequence": 9})

    sent = await manager.send_initial("u1", websocket, 4, {"type": "init", "sequence": 4})

    assert sent is False
    assert [message["type"] for message in websocket.sent] == ["groups"]


@pytest.mark.anyio
async def test_sequences_are_tracked_per_subscriber(manager: FeedSubscriptionManager) -> None:
    early = RecordingWebSocket()
    late = RecordingWebSocket()
    await manager.subscribe("u1", early)
    await manager.push("u1", 4, {"sequence": 4})
    await manager.subscribe("u1", late)

    await manager.send_initial("u1", late, 4, {"sequence": 4})
    delivered = await manager.push("u1", 6, {"sequence": 6})

    assert delivered == 2
    assert [message["sequence"] for message in early.sent] == [4, 6]
    assert [message["sequence"] for message in late.sent] == [4, 6]


@pytest.mark.anyio
async def test_failing_subscriber_is_dropped(manager: FeedSubscriptionManager, caplog) -> None:
    healthy = RecordingWebSocket()
    broken = RecordingWebSocket(fail=True)
    await manager.subscribe("u1", healthy)
    await manager.subscribe("u1", broken)

    with caplog.at_level("DEBUG"):
        delivered = await manager.push("u1", 1, {"sequence": 1})

    assert delivered == 1
    assert manager.subscriber_count("u1") == 1
    assert manager.delivered_sequence("u1", broken) is None
    assert "Dropping websocket for user u1" in caplog.text


@pytest.mark.anyio
async def test_publisher_holds_scheduled_deliveries_until_done(
    manager: FeedSubscriptionManager,
) -> None:
    websocket = RecordingWebSocket()
    await manager.subscribe("u1", websocket)
    publisher = GroupedNotificationPublisher(manager)

    publisher.dispatch(GroupedSnapshot(user_id="u1", sequence=2, groups=()))
    publisher.dispatch(GroupedSnapshot(user_id="u1", sequence=1, groups=()))
    assert publisher.pending == 2

    await publisher.flush()
    # Done callbacks run on the next loop iteration.
    await asyncio.sleep(0)

    assert publisher.pending == 0
    assert websocket.sent == [{"type": "groups", "sequence": 2, "data": []}]


@pytest.mark.anyio
async def test_flush_without_pending_deliveries_returns(
    manager: FeedSubscriptionManager,
) -> None:
    publisher = GroupedNotificationPublisher(manager)

    await publisher.flush()

    assert publisher.pending == 0
