from enum import Enum


class RefundStatus(str, Enum):
    """返金ステータス"""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
