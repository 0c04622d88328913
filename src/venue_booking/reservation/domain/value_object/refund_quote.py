from dataclasses import dataclass

from venue_booking.reservation.domain.enum import RefundStatus
from venue_booking.shared.domain import Money


@dataclass(frozen=True)
class RefundQuote:
    """返金ポリシーの算出結果"""

    refund_amount: Money
    proposed_status: RefundStatus
