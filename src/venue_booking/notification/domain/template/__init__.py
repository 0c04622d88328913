from . import notification_templates

__all__ = ["notification_templates"]
