"""Read-side views assembled by the services."""

from dataclasses import dataclass, field
from datetime import datetime

from src.models.account import Account
from src.models.bank import Bank
from src.models.institution import Institution


@dataclass(frozen=True)
class AccountView:
    """An account enriched with its bank link and institution."""

    id: str
    bank_id: str
    institution_id: str
    institution_name: str
    name: str
    official_name: str
    mask: str
    type: str
    subtype: str
    available_balance: int
    current_balance: int
    shareable_id: str

    @classmethod
    def build(cls, account: Account, bank: Bank, institution: Institution) -> "AccountView":
        return cls(
            id=account.id,
            bank_id=bank.id,
            institution_id=institution.id,
            institution_name=institution.name,
            name=account.name,
            official_name=account.official_name,
            mask=account.mask,
            type=account.type,
            subtype=account.subtype,
            available_balance=account.available_balance,
            current_balance=account.current_balance,
            shareable_id=bank.shareable_id,
        )


@dataclass(frozen=True)
class AccountsSummary:
    """All resolvable accounts of one user plus their totals."""

    accounts: list[AccountView] = field(default_factory=list)
    total_banks: int = 0
    total_current_balance: int = 0


@dataclass(frozen=True)
class HistoryEntry:
    """One row of the merged history feed.

    ``amount`` is signed cents (negative = outgoing). ``type`` is 'debit' or
    'credit'; ``source`` is 'external' or 'transfer'.
    """

    id: str
    name: str
    amount: int
    date: datetime
    category: str
    channel: str
    pending: bool
    type: str
    source: str


@dataclass(frozen=True)
class AccountDetail:
    """A single account view with its full merged history."""

    account: AccountView
    transactions: list[HistoryEntry]
