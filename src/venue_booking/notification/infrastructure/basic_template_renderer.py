from html import escape

from venue_booking.notification.domain.gateway import TemplateRenderer
from venue_booking.notification.domain.value_object import (
    NotificationContent,
    Recipient,
    RenderedDocument,
)


class BasicTemplateRenderer(TemplateRenderer):
    """通知内容からシンプルな HTML / テキスト本文を生成する"""

    def __init__(self, brand_name: str = "Venue Booking") -> None:
        self.brand_name = brand_name

    def render(
        self, content: NotificationContent, recipient: Recipient
    ) -> RenderedDocument:
        greeting = f"Hello {recipient.display_name},"
        details = [
            (key.replace("_", " ").capitalize(), str(value))
            for key, value in content.metadata.items()
            if value not in (None, "")
        ]

        text_lines = [greeting, "", content.message]
        if details:
            text_lines.append("")
            text_lines.extend(f"{label}: {value}" for label, value in details)
        text_lines.extend(["", f"- {self.brand_name}"])

        rows = "".join(
            f"<tr><th>{escape(label)}</th><td>{escape(value)}</td></tr>"
            for label, value in details
        )
        html = (
            f'<html><body data-template="{escape(content.template_name)}">'
            f"<h1>{escape(content.title)}</h1>"
            f"<p>{escape(greeting)}</p>"
            f"<p>{escape(content.message)}</p>"
            + (f"<table>{rows}</table>" if rows else "")
            + f"<p>{escape(self.brand_name)}</p>"
            "</body></html>"
        )
        return RenderedDocument(html=html, text="\n".join(text_lines))
