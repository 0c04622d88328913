from typing import Any

from venue_booking.notification.domain.entity import Notification
from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.repository import (
    NotificationFilter,
    NotificationPage,
    NotificationRepository,
)
from venue_booking.notification.domain.value_object import (
    NotificationContent,
    NotificationId,
)
from venue_booking.shared.domain import UserId
from venue_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from venue_booking.shared.utils.clock import Clock, utc_now
from venue_booking.shared.utils.logger import get_logger

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

logger = get_logger("notification")


class NotificationInboxService:
    """ユーザーのアプリ内通知（受信箱）の操作

    すべての操作は user_id で所有者を絞り込む。他人の通知は存在しないものとして扱う。
    """

    def __init__(
        self, repository: NotificationRepository, clock: Clock = utc_now
    ) -> None:
        self._repository = repository
        self._clock = clock

    def list_notifications(
        self,
        user_id: UserId,
        notification_filter: NotificationFilter | None = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> NotificationPage:
        if page < 1:
            raise BusinessRuleViolationException("page must be 1 or greater")
        if limit < 1:
            raise BusinessRuleViolationException("limit must be 1 or greater")
        return self._repository.list_for_user(
            user_id,
            notification_filter or NotificationFilter(),
            page,
            min(limit, MAX_PAGE_SIZE),
        )

    def unread_count(self, user_id: UserId) -> int:
        return self._repository.count_unread(user_id)

    def get(self, user_id: UserId, notification_id: NotificationId) -> Notification:
        notification = self._repository.find_for_user(notification_id, user_id)
        if notification is None:
            raise ResourceNotFoundException(f"Notification not found: {notification_id}")
        return notification

    def mark_as_read(
        self, user_id: UserId, notification_ids: list[NotificationId]
    ) -> int:
        """指定した通知を既読にして、更新件数を返す

        見つからない（または他人の）通知は数えずに読み飛ばす。
        """
        updated = 0
        for notification_id in notification_ids:
            notification = self._repository.find_for_user(notification_id, user_id)
            if notification is None:
                logger.info(
                    "Notification to mark as read was not found",
                    extra={"notification_id": str(notification_id)},
                )
                continue
            if notification.mark_as_read(self._clock()):
                self._repository.update(notification)
                updated += 1
        return updated

    def mark_all_as_read(self, user_id: UserId) -> int:
        unread: list[Notification] = []
        page = 1
        while True:
            result = self._repository.list_for_user(
                user_id, NotificationFilter(is_read=False), page, MAX_PAGE_SIZE
            )
            unread.extend(result.items)
            if not result.has_more:
                break
            page += 1

        now = self._clock()
        for notification in unread:
            notification.mark_as_read(now)
            self._repository.update(notification)
        return len(unread)

    def delete(self, user_id: UserId, notification_id: NotificationId) -> None:
        if not self._repository.delete(notification_id, user_id):
            raise ResourceNotFoundException(f"Notification not found: {notification_id}")

    def create_custom(
        self,
        user_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        metadata: dict[str, Any] | None = None,
    ) -> Notification:
        """外部メッセージを伴わないアプリ内通知を作成する"""
        content = NotificationContent(
            type=type,
            title=title,
            message=message,
            subject=title,
            template_name="custom",
            metadata=metadata or {},
        )
        notification = Notification.create(user_id, content, self._clock())
        self._repository.save(notification)
        return notification
