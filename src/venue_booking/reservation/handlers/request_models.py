from pydantic import BaseModel, Field

from venue_booking.reservation.domain.enum import ReservationStatus
from venue_booking.shared.domain import Actor, Role, UserId


class ActorRequest(BaseModel):
    """操作者（直接呼び出し時のみ使う。API Gateway 経由では JWT クレームから決める）"""

    user_id: str = Field(..., min_length=1)
    role: Role = Role.USER

    def to_actor(self) -> Actor:
        return Actor(user_id=UserId(value=self.user_id), role=self.role)


class CancelReservationRequest(BaseModel):
    """予約キャンセルリクエストモデル"""

    reservation_id: str = Field(..., min_length=1, examples=["5f0c..."])
    reason: str | None = Field(default=None, max_length=500)
    actor: ActorRequest | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "reservation_id": "6a1e3f0e-2c1b-4b8a-9a7e-3f1d2c4b5a6e",
                    "reason": "Change of plans",
                    "actor": {"user_id": "user-123", "role": "USER"},
                }
            ]
        }
    }


class TransitionReservationRequest(BaseModel):
    """予約ステータス遷移リクエストモデル（キャンセル以外）"""

    reservation_id: str = Field(..., min_length=1)
    target_status: ReservationStatus
    actor: ActorRequest | None = None


class RefundReservationRequest(BaseModel):
    """返金ワークフローのリクエストモデル

    action=start で返金依頼、action=resolve で結果を記録する。
    """

    reservation_id: str = Field(..., min_length=1)
    action: str = Field(default="start", pattern="^(start|resolve)$")
    succeeded: bool | None = None
