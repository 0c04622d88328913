import pytest

from venue_booking.notification.domain.enum import DispatchChannel
from venue_booking.notification.domain.value_object import (
    ChannelResult,
    DispatchResult,
    Recipient,
)
from venue_booking.shared.domain import UserId


class TestDispatchResult:
    @pytest.mark.parametrize(
        "message_ok, in_app_ok, overall, degraded",
        [
            (True, True, True, False),
            (True, False, True, True),
            (False, True, False, True),
            (False, False, False, True),
        ],
    )
    def test_overall_success_follows_message_channel(
        self, message_ok, in_app_ok, overall, degraded
    ):
        result = DispatchResult(
            message=(
                ChannelResult.succeeded(DispatchChannel.MESSAGE, "m-1")
                if message_ok
                else ChannelResult.failed(DispatchChannel.MESSAGE, "error")
            ),
            in_app=(
                ChannelResult.succeeded(DispatchChannel.IN_APP, "n-1")
                if in_app_ok
                else ChannelResult.failed(DispatchChannel.IN_APP, "error")
            ),
        )

        assert result.overall_success is overall
        assert result.degraded is degraded

    def test_failed_marks_both_channels(self):
        result = DispatchResult.failed("boom")

        assert not result.message.success
        assert not result.in_app.success
        assert result.in_app.error == "boom"


class TestRecipient:
    def test_invalid_email_raises_error(self):
        with pytest.raises(ValueError, match="Invalid recipient email"):
            Recipient(user_id=UserId(value="user-1"), email="nobody")

    def test_display_name_falls_back_to_email(self):
        recipient = Recipient(user_id=UserId(value="user-1"), email="a@example.com")
        assert recipient.display_name == "a@example.com"
