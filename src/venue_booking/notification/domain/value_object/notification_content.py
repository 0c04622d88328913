from dataclasses import dataclass, field
from typing import Any

from venue_booking.notification.domain.enum import NotificationType


@dataclass(frozen=True)
class NotificationContent:
    """テンプレートから組み立てた 1 件分の通知内容

    title / message はアプリ内通知に、subject / template_name は外部メッセージに使う。
    """

    type: NotificationType
    title: str
    message: str
    subject: str
    template_name: str
    metadata: dict[str, Any] = field(default_factory=dict)
