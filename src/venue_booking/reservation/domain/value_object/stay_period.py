from dataclasses import dataclass
from datetime import datetime

from venue_booking.shared.utils.clock import as_utc


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日時 + チェックアウト日時)"""

    check_in: datetime
    check_out: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "check_in", as_utc(self.check_in))
        object.__setattr__(self, "check_out", as_utc(self.check_out))

        if self.check_out <= self.check_in:
            raise ValueError("Check-out must be after check-in")

    def nights(self) -> int:
        """宿泊数を計算する（日付の差）"""
        return (self.check_out.date() - self.check_in.date()).days
