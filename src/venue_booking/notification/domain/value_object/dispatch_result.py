from __future__ import annotations

from dataclasses import dataclass

from venue_booking.notification.domain.enum import DispatchChannel


@dataclass(frozen=True)
class ChannelResult:
    """1 チャネル分の送信結果"""

    channel: DispatchChannel
    success: bool
    reference_id: str | None = None
    error: str | None = None

    @classmethod
    def succeeded(cls, channel: DispatchChannel, reference_id: str) -> ChannelResult:
        return cls(channel=channel, success=True, reference_id=reference_id)

    @classmethod
    def failed(cls, channel: DispatchChannel, error: str) -> ChannelResult:
        return cls(channel=channel, success=False, error=error)

    def to_dict(self) -> dict:
        return {
            "channel": self.channel.value,
            "success": self.success,
            "reference_id": self.reference_id,
            "error": self.error,
        }


@dataclass(frozen=True)
class DispatchResult:
    """外部メッセージとアプリ内通知の複合結果

    overall_success は外部メッセージチャネルの成否だけで決まる。
    アプリ内通知の失敗は in_app に記録されるが overall_success は変えない。
    """

    message: ChannelResult
    in_app: ChannelResult

    @property
    def overall_success(self) -> bool:
        return self.message.success

    @property
    def degraded(self) -> bool:
        """どちらかのチャネルが失敗したかどうか"""
        return not (self.message.success and self.in_app.success)

    @classmethod
    def failed(cls, error: str) -> DispatchResult:
        """両チャネルとも試行できなかった場合の結果"""
        return cls(
            message=ChannelResult.failed(DispatchChannel.MESSAGE, error),
            in_app=ChannelResult.failed(DispatchChannel.IN_APP, error),
        )

    def to_dict(self) -> dict:
        return {
            "overall_success": self.overall_success,
            "message": self.message.to_dict(),
            "in_app": self.in_app.to_dict(),
        }
