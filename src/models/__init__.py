"""Data models for the ledger."""

from .account import Account
from .bank import Bank
from .institution import Institution
from .transaction import Transaction
from .transfer import Transfer
from .user import User
from .views import AccountDetail, AccountsSummary, AccountView, HistoryEntry
from .exceptions import (
    BankError,
    NotFoundError,
    UserNotFoundError,
    BankNotFoundError,
    AccountNotFoundError,
    InstitutionNotFoundError,
    InconsistentBankError,
    InvalidAmountError,
    InsufficientFundsError,
    InvalidTransferError,
    UserAlreadyExistsError,
    AccountAlreadyExistsError,
    AccountAlreadyLinkedError,
    InvalidCredentialsError,
)

__all__ = [
    "Account",
    "Bank",
    "Institution",
    "Transaction",
    "Transfer",
    "User",
    "AccountDetail",
    "AccountsSummary",
    "AccountView",
    "HistoryEntry",
    "BankError",
    "NotFoundError",
    "UserNotFoundError",
    "BankNotFoundError",
    "AccountNotFoundError",
    "InstitutionNotFoundError",
    "InconsistentBankError",
    "InvalidAmountError",
    "InsufficientFundsError",
    "InvalidTransferError",
    "UserAlreadyExistsError",
    "AccountAlreadyExistsError",
    "AccountAlreadyLinkedError",
    "InvalidCredentialsError",
]
