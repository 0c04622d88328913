from .clock import Clock, as_utc, utc_now
from .http_response import api_response
from .logger import get_logger
from .validators import to_decimal

__all__ = ["Clock", "api_response", "as_utc", "get_logger", "to_decimal", "utc_now"]
