from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from venue_booking.notification.domain.entity import Notification
from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.value_object import NotificationId
from venue_booking.shared.domain import UserId


@dataclass(frozen=True)
class NotificationFilter:
    """一覧取得の絞り込み条件（None は条件なし）"""

    type: NotificationType | None = None
    is_read: bool | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def matches(self, notification: Notification) -> bool:
        if self.type is not None and notification.type != self.type:
            return False
        if self.is_read is not None and notification.is_read != self.is_read:
            return False
        if self.created_from is not None and notification.created_at < self.created_from:
            return False
        if self.created_to is not None and notification.created_at > self.created_to:
            return False
        return True


@dataclass(frozen=True)
class NotificationPage:
    items: list[Notification] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20

    @property
    def has_more(self) -> bool:
        return self.page * self.limit < self.total


class NotificationRepository(ABC):
    """Notification Store のインターフェース"""

    @abstractmethod
    def save(self, notification: Notification) -> None:
        """通知を新規保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_for_user(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification | None:
        """指定ユーザーの通知を ID で検索する（他人の通知は None）"""
        raise NotImplementedError

    @abstractmethod
    def list_for_user(
        self,
        user_id: UserId,
        notification_filter: NotificationFilter,
        page: int,
        limit: int,
    ) -> NotificationPage:
        """作成日時の新しい順で一覧を返す"""
        raise NotImplementedError

    @abstractmethod
    def count_unread(self, user_id: UserId) -> int:
        raise NotImplementedError

    @abstractmethod
    def update(self, notification: Notification) -> None:
        """既読状態を更新する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """削除できた場合 True"""
        raise NotImplementedError

    @abstractmethod
    def delete_created_before(self, cutoff: datetime) -> int:
        """cutoff より前に作成された通知を削除し、件数を返す"""
        raise NotImplementedError
