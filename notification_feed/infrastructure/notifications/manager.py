"""Track which feed snapshot each websocket subscriber has received."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class FeedSubscriptionManager:
    """Websocket subscribers of each user's grouped feed.

    Every subscriber remembers the sequence of the last snapshot it was sent.
    A message computed from a snapshot at or below that sequence is skipped,
    so a slow push can never overwrite a newer feed on the client.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, dict[WebSocket, int]] = {}

    async def subscribe(self, user_id: str, websocket: WebSocket) -> None:
        """Accept ``websocket`` and register it as a feed subscriber of ``user_id``."""

        await websocket.accept()
        self._subscribers.setdefault(user_id, {})[websocket] = 0

    def unsubscribe(self, user_id: str, websocket: WebSocket) -> None:
        subscribers = self._subscribers.get(user_id)
        if subscribers is None:
            return
        subscribers.pop(websocket, None)
        if not subscribers:
            self._subscribers.pop(user_id, None)

    def subscriber_count(self, user_id: str) -> int:
        return len(self._subscribers.get(user_id, ()))

    def delivered_sequence(self, user_id: str, websocket: WebSocket) -> int | None:
        """Return the last sequence sent to ``websocket``, or ``None`` if unknown."""

        return self._subscribers.get(user_id, {}).get(websocket)

    async def send_initial(
        self, user_id: str, websocket: WebSocket, sequence: int, message: dict[str, Any]
    ) -> bool:
        """Send the first feed to a freshly subscribed ``websocket``."""

        return await self._deliver(user_id, websocket, sequence, message)

    async def push(self, user_id: str, sequence: int, message: dict[str, Any]) -> int:
        """Send ``message`` to every subscriber still behind ``sequence``.

        Returns the number of subscribers that received it.
        """

        delivered = 0
        for websocket in list(self._subscribers.get(user_id, {})):
            if await self._deliver(user_id, websocket, sequence, message):
                delivered += 1
        return delivered

    async def _deliver(
        self, user_id: str, websocket: WebSocket, sequence: int, message: dict[str, Any]
    ) -> bool:
        subscribers = self._subscribers.get(user_id)
        if subscribers is None or websocket not in subscribers:
            return False
        if sequence <= subscribers[websocket]:
            logger.debug(
                "Skipping snapshot %s for user %s; subscriber already has %s",
                sequence,
                user_id,
                subscribers[websocket],
            )
            return False

        # Claimed before the send so a concurrent older push sees it.
        subscribers[websocket] = sequence
        try:
            await websocket.send_json(message)
        except Exception as exc:
            logger.debug("Dropping websocket for user %s: %s", user_id, exc)
            self.unsubscribe(user_id, websocket)
            return False
        return True


feed_subscriptions = FeedSubscriptionManager()


__all__ = ["FeedSubscriptionManager", "feed_subscriptions"]
