from datetime import datetime, timedelta
from decimal import Decimal

from venue_booking.reservation.domain.enum import RefundStatus
from venue_booking.reservation.domain.value_object import RefundQuote
from venue_booking.shared.domain import Money
from venue_booking.shared.utils.clock import as_utc

FULL_REFUND_THRESHOLD = timedelta(hours=48)
PARTIAL_REFUND_THRESHOLD = timedelta(hours=24)
FULL_REFUND_RATE = Decimal("1")
PARTIAL_REFUND_RATE = Decimal("0.5")
NO_REFUND_RATE = Decimal("0")


class RefundPolicy:
    """チェックインまでの残り時間で返金額を決める返金ポリシー

    - 48 時間より前: 全額
    - 24 時間より前（48 時間ちょうどを含む）: 50%
    - それ以降（24 時間ちょうど・チェックイン後を含む）: 返金なし

    境界は厳密な「より大きい」で比較する。
    """

    def refund_rate(self, check_in: datetime, now: datetime) -> Decimal:
        """返金率を返す"""
        until_check_in = as_utc(check_in) - as_utc(now)
        if until_check_in > FULL_REFUND_THRESHOLD:
            return FULL_REFUND_RATE
        if until_check_in > PARTIAL_REFUND_THRESHOLD:
            return PARTIAL_REFUND_RATE
        return NO_REFUND_RATE

    def compute_refund(
        self, total: Money, check_in: datetime, now: datetime
    ) -> RefundQuote:
        """返金額と返金ステータスの初期値を算出する"""
        refund_amount = total.multiply(self.refund_rate(check_in, now))
        proposed_status = (
            RefundStatus.COMPLETED if refund_amount.is_zero() else RefundStatus.PENDING
        )
        return RefundQuote(refund_amount=refund_amount, proposed_status=proposed_status)


def compute_refund(total: Money, check_in: datetime, now: datetime) -> RefundQuote:
    """RefundPolicy().compute_refund のショートカット"""
    return RefundPolicy().compute_refund(total, check_in, now)
