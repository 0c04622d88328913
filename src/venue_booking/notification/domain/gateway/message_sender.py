from abc import ABC, abstractmethod

from venue_booking.notification.domain.value_object import OutboundMessage


class MessageSender(ABC):
    """外部メッセージ（メール）送信のインターフェース"""

    @abstractmethod
    def send(self, message: OutboundMessage) -> str:
        """送信してプロバイダのメッセージIDを返す。失敗時は例外を送出する"""
        raise NotImplementedError
