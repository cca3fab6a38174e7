"""Custom exceptions for the ledger."""


class BankError(Exception):
    """Base exception for all ledger errors."""
    pass


class NotFoundError(BankError):
    """Raised when a referenced entity does not exist."""
    pass


class UserNotFoundError(NotFoundError):
    """Raised when a user cannot be found."""
    pass


class BankNotFoundError(NotFoundError):
    """Raised when a bank link cannot be found."""
    pass


class AccountNotFoundError(NotFoundError):
    """Raised when an account cannot be found."""
    pass


class InstitutionNotFoundError(NotFoundError):
    """Raised when an institution identifier is not in the directory."""
    pass


class InconsistentBankError(NotFoundError):
    """Raised when a bank link points at a missing account or institution."""
    pass


class InvalidAmountError(BankError):
    """Raised when an amount is not a positive, finite number of cents."""
    pass


class InsufficientFundsError(BankError):
    """Raised when the sender's available balance is below the amount."""
    pass


class InvalidTransferError(BankError):
    """Raised when a transfer operation is invalid (e.g., sender == receiver)."""
    pass


class UserAlreadyExistsError(BankError):
    """Raised when signing up with an email that is already registered."""
    pass


class AccountAlreadyExistsError(BankError):
    """Raised when attempting to create an account that already exists."""
    pass


class AccountAlreadyLinkedError(BankError):
    """Raised when an account already has a bank link."""
    pass


class InvalidCredentialsError(BankError):
    """Raised when a sign-in password does not match."""
    pass
