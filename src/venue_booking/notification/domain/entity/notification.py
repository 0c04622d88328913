from __future__ import annotations

from datetime import datetime
from typing import Any

from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.value_object import (
    NotificationContent,
    NotificationId,
)
from venue_booking.shared.domain import AggregateRoot, UserId
from venue_booking.shared.utils.clock import as_utc


class Notification(AggregateRoot[NotificationId]):
    """アプリ内通知エンティティ"""

    def __init__(
        self,
        id: NotificationId,
        user_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        created_at: datetime,
        metadata: dict[str, Any] | None = None,
        is_read: bool = False,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        if not title.strip():
            raise ValueError("Notification title cannot be empty")
        self._user_id = user_id
        self._type = type
        self._title = title
        self._message = message
        self._metadata = dict(metadata or {})
        self._is_read = is_read
        self._created_at = as_utc(created_at)
        self._updated_at = as_utc(updated_at) if updated_at else self._created_at

    @classmethod
    def create(
        cls, user_id: UserId, content: NotificationContent, now: datetime
    ) -> Notification:
        """通知内容から未読の通知を作成する"""
        return cls(
            id=NotificationId.generate(),
            user_id=user_id,
            type=content.type,
            title=content.title,
            message=content.message,
            metadata=content.metadata,
            created_at=now,
        )

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def type(self) -> NotificationType:
        return self._type

    @property
    def title(self) -> str:
        return self._title

    @property
    def message(self) -> str:
        return self._message

    @property
    def metadata(self) -> dict[str, Any]:
        return dict(self._metadata)

    @property
    def is_read(self) -> bool:
        return self._is_read

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: UserId) -> bool:
        return self._user_id == user_id

    def mark_as_read(self, now: datetime) -> bool:
        """既読にする。状態が変わった場合のみ True"""
        if self._is_read:
            return False
        self._is_read = True
        self._updated_at = as_utc(now)
        return True
