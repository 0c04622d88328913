from abc import ABC, abstractmethod

from venue_booking.notification.domain.value_object import (
    NotificationContent,
    Recipient,
    RenderedDocument,
)


class TemplateRenderer(ABC):
    """外部チャネル向けの本文を描画するインターフェース"""

    @abstractmethod
    def render(
        self, content: NotificationContent, recipient: Recipient
    ) -> RenderedDocument:
        raise NotImplementedError
