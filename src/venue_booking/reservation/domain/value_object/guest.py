from dataclasses import dataclass

from venue_booking.shared.domain import UserId


@dataclass(frozen=True)
class Guest:
    """予約の所有者（ゲスト）"""

    user_id: UserId
    name: str
    email: str

    def __post_init__(self) -> None:
        if "@" not in self.email:
            raise ValueError(f"Invalid guest email: {self.email}")
