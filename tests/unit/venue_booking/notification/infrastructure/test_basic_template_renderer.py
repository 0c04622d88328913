from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.value_object import NotificationContent
from venue_booking.notification.infrastructure.basic_template_renderer import (
    BasicTemplateRenderer,
)


class TestBasicTemplateRenderer:
    def test_render_includes_message_and_details(self, recipient):
        content = NotificationContent(
            type=NotificationType.SYSTEM,
            title="Hello <world>",
            message="Body text",
            subject="Subject",
            template_name="welcome",
            metadata={"confirmation_code": "K7QX2M9P", "empty": ""},
        )

        document = BasicTemplateRenderer().render(content, recipient)

        assert "Hello Ana Lopez," in document.text
        assert "Confirmation code: K7QX2M9P" in document.text
        assert "Empty" not in document.text
        assert "<h1>Hello &lt;world&gt;</h1>" in document.html
        assert 'data-template="welcome"' in document.html
