from .notification_repository import (
    NotificationFilter,
    NotificationPage,
    NotificationRepository,
)

__all__ = ["NotificationFilter", "NotificationPage", "NotificationRepository"]
