"""Externally-sourced transaction data model."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Transaction:
    """Represents one merchant/category event on an account.

    ``amount`` is signed cents: negative is money leaving the account,
    positive is money coming in (refunds, deposits).
    """

    id: str | None
    account_id: str
    name: str
    amount: int
    date: date
    category: str
    payment_channel: str
    pending: bool
    logo_url: str | None = None

    @property
    def is_debit(self) -> bool:
        return self.amount < 0
