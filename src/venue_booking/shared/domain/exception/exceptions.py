from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """ドメイン層で発生する基底例外

    code はハンドラでエラーレスポンスに変換する際の識別子。
    """

    code: str = "DOMAIN_ERROR"


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合（所有者以外からの参照も含む）"""

    code = "NOT_FOUND"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    code = "BUSINESS_RULE_VIOLATION"


class InvalidTransitionException(BusinessRuleViolationException):
    """許可されていないステータス遷移"""

    code = "INVALID_TRANSITION"

    def __init__(self, from_status: Any, to_status: Any, message: str | None = None):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            message
            or f"Invalid transition: {_value(from_status)} -> {_value(to_status)}"
        )


class AlreadyCancelledException(InvalidTransitionException):
    """キャンセル済みの予約を再度キャンセルしようとした場合

    reservation には適用済みの状態が入る（冪等な再送への応答に使う）。
    """

    code = "ALREADY_CANCELLED"

    def __init__(self, reservation: Any = None) -> None:
        self.reservation = reservation
        super().__init__(
            "CANCELLED", "CANCELLED", "Reservation is already cancelled"
        )


class CannotCancelCompletedException(InvalidTransitionException):
    """チェックアウト済みの予約をキャンセルしようとした場合"""

    code = "CANNOT_CANCEL_COMPLETED"

    def __init__(self) -> None:
        super().__init__(
            "CHECKED_OUT", "CANCELLED", "Cannot cancel a completed reservation"
        )


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    code = "DUPLICATE"


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    code = "CONFLICT"


def _value(status: Any) -> str:
    return getattr(status, "value", str(status))
