from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        self._ensure_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, rate: Decimal) -> Money:
        """率を掛けて最小通貨単位に丸める"""
        scaled = (self.amount * rate).quantize(
            self.currency.quantum, rounding=ROUND_HALF_UP
        )
        return Money(amount=scaled, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def exceeds(self, other: Money) -> bool:
        """other より大きいかどうか"""
        self._ensure_same_currency(other)
        return self.amount > other.amount

    def _ensure_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot combine money with different currencies")

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """0 円（通貨単位に合わせた桁数）"""
        return cls(Decimal(0).quantize(currency.quantum), currency)

    @classmethod
    def mxn(cls, amount: Decimal) -> Money:
        """メキシコペソで Money を生成"""
        return cls(amount, Currency.mxn())

    @classmethod
    def usd(cls, amount: Decimal) -> Money:
        """米ドルで Money を生成"""
        return cls(amount, Currency.usd())
