from .message_sender import MessageSender
from .template_renderer import TemplateRenderer

__all__ = ["MessageSender", "TemplateRenderer"]
