from dataclasses import dataclass, field


@dataclass(frozen=True)
class RenderedDocument:
    """外部チャネル向けに描画された本文"""

    html: str
    text: str


@dataclass(frozen=True)
class OutboundMessage:
    """MessageSender に渡す送信内容"""

    to: str
    subject: str
    html: str
    text: str
    tags: dict[str, str] = field(default_factory=dict)
