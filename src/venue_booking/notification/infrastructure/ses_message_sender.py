import os

import boto3

from venue_booking.notification.domain.gateway import MessageSender
from venue_booking.notification.domain.value_object import OutboundMessage
from venue_booking.shared.utils.clock import Clock, utc_now
from venue_booking.shared.utils.config import boto_client_config, get_bool_env
from venue_booking.shared.utils.logger import get_logger

logger = get_logger("notification")


class SesMessageSender(MessageSender):
    """Amazon SES v2 を使用した MessageSender の具象実装

    EMAILS_ENABLED が無効な場合は送信せず、成功扱いのダミーIDを返す。
    タイムアウトを含む送信エラーはそのまま送出する（呼び出し側でチャネル失敗として扱う）。
    """

    def __init__(
        self,
        sender_email: str | None = None,
        enabled: bool | None = None,
        client=None,
        clock: Clock = utc_now,
    ) -> None:
        self.sender_email = sender_email or os.getenv("SENDER_EMAIL")
        self.enabled = (
            enabled if enabled is not None else get_bool_env("EMAILS_ENABLED", True)
        )
        self.client = client or boto3.client("sesv2", config=boto_client_config())
        self._clock = clock

    def send(self, message: OutboundMessage) -> str:
        if not self.enabled:
            logger.info(
                "Email sending is disabled, skipping",
                extra={"to": message.to, "subject": message.subject},
            )
            return f"disabled-{int(self._clock().timestamp() * 1000)}"

        if not self.sender_email:
            raise ValueError("SENDER_EMAIL is not configured")

        response = self.client.send_email(
            FromEmailAddress=self.sender_email,
            Destination={"ToAddresses": [message.to]},
            Content={
                "Simple": {
                    "Subject": {"Data": message.subject, "Charset": "UTF-8"},
                    "Body": {
                        "Html": {"Data": message.html, "Charset": "UTF-8"},
                        "Text": {"Data": message.text, "Charset": "UTF-8"},
                    },
                }
            },
            EmailTags=[
                {"Name": name, "Value": _tag_value(value)}
                for name, value in message.tags.items()
            ],
        )
        message_id = response["MessageId"]
        logger.info(
            "Email sent", extra={"message_id": message_id, "to": message.to}
        )
        return message_id


def _tag_value(value: str) -> str:
    """SES のタグ値に使えない文字を置き換える"""
    return "".join(c if c.isalnum() or c in "_-." else "_" for c in value)
