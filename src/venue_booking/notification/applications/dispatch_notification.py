from venue_booking.notification.domain.entity import Notification
from venue_booking.notification.domain.enum import DispatchChannel
from venue_booking.notification.domain.gateway import MessageSender, TemplateRenderer
from venue_booking.notification.domain.repository import NotificationRepository
from venue_booking.notification.domain.value_object import (
    ChannelResult,
    DispatchResult,
    NotificationContent,
    OutboundMessage,
    Recipient,
)
from venue_booking.shared.utils.clock import Clock, utc_now
from venue_booking.shared.utils.logger import get_logger

logger = get_logger("notification")


def describe_error(error: Exception) -> str:
    return f"{type(error).__name__}: {error}"


class NotificationDispatcher:
    """2 チャネル通知の送信

    1. 外部メッセージを描画して送信する
    2. 1 の成否にかかわらずアプリ内通知を保存する

    どちらのチャネルの失敗も例外として外に出さず、DispatchResult に記録する。
    """

    def __init__(
        self,
        message_sender: MessageSender,
        notification_repository: NotificationRepository,
        template_renderer: TemplateRenderer,
        clock: Clock = utc_now,
    ) -> None:
        self._message_sender = message_sender
        self._notification_repository = notification_repository
        self._template_renderer = template_renderer
        self._clock = clock

    def dispatch(
        self, recipient: Recipient, content: NotificationContent
    ) -> DispatchResult:
        message_result = self._send_message(recipient, content)
        in_app_result = self._store_notification(recipient, content)

        result = DispatchResult(message=message_result, in_app=in_app_result)
        if result.degraded:
            logger.warning(
                "Notification dispatch degraded",
                extra={
                    "user_id": str(recipient.user_id),
                    "notification_type": content.type.value,
                    "dispatch": result.to_dict(),
                },
            )
        return result

    def _send_message(
        self, recipient: Recipient, content: NotificationContent
    ) -> ChannelResult:
        try:
            document = self._template_renderer.render(content, recipient)
            message_id = self._message_sender.send(
                OutboundMessage(
                    to=recipient.email,
                    subject=content.subject,
                    html=document.html,
                    text=document.text,
                    tags={
                        "notification_type": content.type.value,
                        "template": content.template_name,
                    },
                )
            )
        except Exception as e:
            logger.exception(
                "Failed to send message",
                extra={
                    "user_id": str(recipient.user_id),
                    "template": content.template_name,
                },
            )
            return ChannelResult.failed(DispatchChannel.MESSAGE, describe_error(e))
        return ChannelResult.succeeded(DispatchChannel.MESSAGE, message_id)

    def _store_notification(
        self, recipient: Recipient, content: NotificationContent
    ) -> ChannelResult:
        try:
            notification = Notification.create(recipient.user_id, content, self._clock())
            self._notification_repository.save(notification)
        except Exception as e:
            logger.exception(
                "Failed to store in-app notification",
                extra={
                    "user_id": str(recipient.user_id),
                    "notification_type": content.type.value,
                },
            )
            return ChannelResult.failed(DispatchChannel.IN_APP, describe_error(e))
        return ChannelResult.succeeded(DispatchChannel.IN_APP, str(notification.id))
