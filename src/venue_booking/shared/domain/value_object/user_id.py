from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """ユーザーID（全コンテキスト共通）

    Value Object として不変性を保証。
    同じ値を持つ UserId は同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
