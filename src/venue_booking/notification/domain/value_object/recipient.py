from dataclasses import dataclass

from venue_booking.shared.domain import UserId


@dataclass(frozen=True)
class Recipient:
    """通知の宛先（ゲストまたは管理者）"""

    user_id: UserId
    email: str
    name: str = ""

    def __post_init__(self) -> None:
        if "@" not in self.email:
            raise ValueError(f"Invalid recipient email: {self.email}")

    @property
    def display_name(self) -> str:
        return self.name or self.email
