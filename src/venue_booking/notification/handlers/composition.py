"""Lambda 間で共通の依存関係の組み立て"""

from venue_booking.notification.applications.dispatch_notification import (
    NotificationDispatcher,
)
from venue_booking.notification.applications.lifecycle_coordinator import (
    LifecycleEventCoordinator,
)
from venue_booking.notification.domain.value_object import Recipient
from venue_booking.notification.infrastructure.basic_template_renderer import (
    BasicTemplateRenderer,
)
from venue_booking.notification.infrastructure.dynamodb_notification_repository import (
    DynamoDBNotificationRepository,
)
from venue_booking.notification.infrastructure.ses_message_sender import (
    SesMessageSender,
)
from venue_booking.shared.domain import UserId
from venue_booking.shared.utils.config import get_env


def build_coordinator() -> LifecycleEventCoordinator:
    dispatcher = NotificationDispatcher(
        message_sender=SesMessageSender(),
        notification_repository=DynamoDBNotificationRepository(),
        template_renderer=BasicTemplateRenderer(),
    )
    return LifecycleEventCoordinator(dispatcher=dispatcher)


def admin_recipient_from_env() -> Recipient | None:
    """ADMIN_USER_ID / ADMIN_EMAIL が両方設定されていれば管理者の宛先を返す"""
    user_id = get_env("ADMIN_USER_ID")
    email = get_env("ADMIN_EMAIL")
    if not user_id or not email:
        return None
    return Recipient(
        user_id=UserId(value=user_id), email=email, name=get_env("ADMIN_NAME", "")
    )
