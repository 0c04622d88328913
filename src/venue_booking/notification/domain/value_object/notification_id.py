from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationId:
    """通知ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("NotificationId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> NotificationId:
        return cls(value=str(uuid.uuid4()))
