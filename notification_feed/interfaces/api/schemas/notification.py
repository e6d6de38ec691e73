"""Pydantic models describing notification payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from notification_feed.domain.entities import NotificationGroup, NotificationRecord


class NotificationRecordPayload(BaseModel):
    """Notification as sent by the producer replacing a user's snapshot.

    Both ``snake_case`` names and the upstream ``camelCase`` names are accepted.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    created_time: int | float | None = Field(
        default=None,
        validation_alias=AliasChoices("created_time", "createdTime"),
        description="Epoch milliseconds",
    )
    is_seen: bool = Field(
        default=False, validation_alias=AliasChoices("is_seen", "isSeen")
    )
    source_type: str | None = Field(
        default=None, validation_alias=AliasChoices("source_type", "sourceType")
    )
    source_contract_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("source_contract_id", "sourceContractId"),
    )
    user_id: str | None = Field(
        default=None, validation_alias=AliasChoices("user_id", "userId")
    )
    reason: str | None = None
    source_user_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("source_user_name", "sourceUserName"),
    )
    source_text: str | None = Field(
        default=None, validation_alias=AliasChoices("source_text", "sourceText")
    )
    source_contract_title: str | None = Field(
        default=None,
        validation_alias=AliasChoices("source_contract_title", "sourceContractTitle"),
    )

    def to_entity(self) -> NotificationRecord:
        return NotificationRecord(
            id=self.id,
            created_time=self.created_time,
            is_seen=self.is_seen,
            source_type=self.source_type,
            source_contract_id=self.source_contract_id,
            user_id=self.user_id,
            reason=self.reason,
            source_user_name=self.source_user_name,
            source_text=self.source_text,
            source_contract_title=self.source_contract_title,
        )


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    created_time: int | float | None
    is_seen: bool
    source_type: str | None = None
    source_contract_id: str | None = None
    user_id: str | None = None
    reason: str | None = None
    source_user_name: str | None = None
    source_text: str | None = None
    source_contract_title: str | None = None

    @classmethod
    def from_entity(cls, record: NotificationRecord) -> "NotificationRead":
        return cls(
            id=record.id,
            created_time=record.created_time,
            is_seen=record.is_seen,
            source_type=record.source_type,
            source_contract_id=record.source_contract_id,
            user_id=record.user_id,
            reason=record.reason,
            source_user_name=record.source_user_name,
            source_text=record.source_text,
            source_contract_title=record.source_contract_title,
        )


class NotificationGroupRead(BaseModel):
    """Group of notifications rendered under a single feed header."""

    group_key: str
    time_period: str
    category: Literal["income", "normal"]
    is_any_seen: bool
    notifications: list[NotificationRead] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, group: NotificationGroup) -> "NotificationGroupRead":
        return cls(
            group_key=group.group_key,
            time_period=group.time_period,
            category=group.category,
            is_any_seen=group.is_any_seen,
            notifications=[NotificationRead.from_entity(r) for r in group.notifications],
        )


class NotificationSnapshotAccepted(BaseModel):
    """Acknowledgement returned after replacing a user's notifications."""

    user_id: str
    sequence: int
    count: int


__all__ = [
    "NotificationGroupRead",
    "NotificationRead",
    "NotificationRecordPayload",
    "NotificationSnapshotAccepted",
]
