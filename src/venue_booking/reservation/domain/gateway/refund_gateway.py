from abc import ABC, abstractmethod

from venue_booking.reservation.domain.entity import Reservation
from venue_booking.shared.domain import Money


class RefundGateway(ABC):
    """決済ゲートウェイへの返金依頼（外部コラボレータ）"""

    @abstractmethod
    def request_refund(self, reservation: Reservation, amount: Money) -> str:
        """返金を依頼し、ゲートウェイ側の返金IDを返す

        失敗時は例外を送出する。
        """
        raise NotImplementedError
