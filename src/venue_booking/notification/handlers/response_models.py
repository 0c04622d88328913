from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from venue_booking.notification.applications.lifecycle_coordinator import (
    LifecycleResult,
)
from venue_booking.notification.domain.entity import Notification
from venue_booking.notification.domain.repository import NotificationPage
from venue_booking.notification.domain.value_object import DispatchResult


class NotificationData(BaseModel):
    """通知のレスポンスモデル"""

    id: str
    user_id: str
    type: str
    title: str
    message: str
    metadata: dict[str, Any]
    is_read: bool
    created_at: str
    updated_at: str


class NotificationListData(BaseModel):
    notifications: list[NotificationData]
    total: int
    page: int
    limit: int
    has_more: bool
    unread_count: int


class LifecycleData(BaseModel):
    event_type: str
    success: bool
    guest_notified: bool
    admin_notified: bool


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: Any = None


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str


def to_notification_data(notification: Notification) -> NotificationData:
    return NotificationData(
        id=str(notification.id),
        user_id=str(notification.user_id),
        type=notification.type.value,
        title=notification.title,
        message=notification.message,
        metadata=notification.metadata,
        is_read=notification.is_read,
        created_at=notification.created_at.isoformat(),
        updated_at=notification.updated_at.isoformat(),
    )


def to_list_data(page: NotificationPage, unread_count: int) -> NotificationListData:
    return NotificationListData(
        notifications=[to_notification_data(n) for n in page.items],
        total=page.total,
        page=page.page,
        limit=page.limit,
        has_more=page.has_more,
        unread_count=unread_count,
    )


def to_lifecycle_data(event_type: str, result: LifecycleResult) -> LifecycleData:
    return LifecycleData(
        event_type=event_type,
        success=result.success,
        guest_notified=result.guest_notified,
        admin_notified=result.admin_notified,
    )


def to_admin_alert_data(dispatch: DispatchResult) -> LifecycleData:
    """管理者アラートの結果（ゲスト宛ての通知はない）"""
    return LifecycleData(
        event_type="ADMIN_ALERT",
        success=dispatch.overall_success,
        guest_notified=False,
        admin_notified=dispatch.overall_success,
    )
