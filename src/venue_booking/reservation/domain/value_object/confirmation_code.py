from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ConfirmationCode:
    """確認コード

    ゲストに見せる短い識別子。英大文字と数字 6-12 文字。
    例: K7QX2M9P
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z0-9]{6,12}$")
    # 読み間違えやすい 0/O, 1/I は生成時に使わない
    ALPHABET: ClassVar[str] = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid confirmation code: {self.value}. "
                "Expected 6-12 uppercase letters or digits"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls, length: int = 8) -> ConfirmationCode:
        """ランダムな確認コードを生成する"""
        return cls("".join(secrets.choice(cls.ALPHABET) for _ in range(length)))
