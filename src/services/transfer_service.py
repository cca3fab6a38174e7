"""Transfer engine: validated, all-or-nothing money movement."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable

from src.models.exceptions import (
    AccountNotFoundError,
    BankError,
    BankNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidTransferError,
)
from src.models.transfer import Transfer
from src.store import EntityStore
from src.utils.money import format_amount, to_cents

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TransferRequest:
    """Everything the engine needs to move money between two bank links."""

    sender_bank_id: str
    receiver_bank_id: str
    amount: Decimal | str | int | float
    label: str
    sender_user_id: str
    receiver_user_id: str
    email: str


class TransferService:
    """Service layer for transfers between bank links."""

    def __init__(self, store: EntityStore, clock: Callable[[], datetime] | None = None):
        """
        Initialize the TransferService.

        Args:
            store: The entity store
            clock: Source of transfer timestamps (default: now, UTC)
        """
        self._store = store
        self._clock = clock or _utcnow

    def transfer(
        self,
        sender_bank_id: str,
        receiver_bank_id: str,
        amount: Decimal | str | int | float,
        label: str,
        sender_user_id: str,
        receiver_user_id: str,
        email: str,
    ) -> Transfer:
        """
        Move money from one bank link's account to another's.

        Checks run in this order, and the first failure wins: both banks
        exist, both accounts exist, the amount is valid, the sender can cover
        it, sender and receiver differ. On success both balances of the
        sender drop by ``amount``, both balances of the receiver rise by it
        and one Transfer is appended, all in one unit of work. On failure
        nothing changes.

        Args:
            sender_bank_id: Bank link paying out
            receiver_bank_id: Bank link receiving
            amount: Positive amount in currency units with at most two decimals
            label: Free-text name shown in the history
            sender_user_id: The sending user id
            receiver_user_id: The receiving user id
            email: Contact email recorded with the transfer

        Returns:
            The created Transfer

        Raises:
            BankNotFoundError: If either bank link doesn't exist
            AccountNotFoundError: If either bank link's account doesn't exist
            InvalidAmountError: If the amount is not a positive finite value
            InsufficientFundsError: If the sender's available balance is too low
            InvalidTransferError: If sender and receiver are the same bank link
        """
        try:
            with self._store.transaction():
                sender_bank = self._store.banks.find_by_id(sender_bank_id)
                if sender_bank is None:
                    raise BankNotFoundError(f"Sender bank {sender_bank_id} not found")
                receiver_bank = self._store.banks.find_by_id(receiver_bank_id)
                if receiver_bank is None:
                    raise BankNotFoundError(f"Receiver bank {receiver_bank_id} not found")

                sender = self._store.accounts.find_by_id(sender_bank.account_id)
                if sender is None:
                    raise AccountNotFoundError(f"Sender account {sender_bank.account_id} not found")
                receiver = self._store.accounts.find_by_id(receiver_bank.account_id)
                if receiver is None:
                    raise AccountNotFoundError(
                        f"Receiver account {receiver_bank.account_id} not found"
                    )

                cents = to_cents(amount)
                if cents <= 0:
                    raise InvalidAmountError(
                        f"Cannot transfer {amount}. Amount must be greater than zero."
                    )

                if cents > sender.available_balance:
                    raise InsufficientFundsError(
                        f"Insufficient funds: {format_amount(sender.available_balance)} available, "
                        f"{format_amount(cents)} requested"
                    )

                if sender_bank.id == receiver_bank.id:
                    raise InvalidTransferError("Cannot transfer to the same account")

                self._store.accounts.update_balances(sender.id, -cents)
                self._store.accounts.update_balances(receiver.id, cents)
                transfer = self._store.transfers.create(
                    Transfer.create(
                        name=label,
                        amount=cents,
                        sender_id=sender_user_id,
                        sender_bank_id=sender_bank.id,
                        receiver_id=receiver_user_id,
                        receiver_bank_id=receiver_bank.id,
                        email=email,
                        created_at=self._clock(),
                    )
                )
        except BankError as err:
            logger.warning(
                "Transfer %s -> %s rejected: %s", sender_bank_id, receiver_bank_id, err
            )
            raise

        logger.info(
            "Transfer %s: %s from bank %s to bank %s",
            transfer.id,
            format_amount(transfer.amount),
            transfer.sender_bank_id,
            transfer.receiver_bank_id,
        )
        return transfer

    def submit(self, request: TransferRequest) -> Transfer:
        """Run ``transfer`` with the fields of a TransferRequest."""
        return self.transfer(
            sender_bank_id=request.sender_bank_id,
            receiver_bank_id=request.receiver_bank_id,
            amount=request.amount,
            label=request.label,
            sender_user_id=request.sender_user_id,
            receiver_user_id=request.receiver_user_id,
            email=request.email,
        )

    def list_transfers(self, bank_id: str) -> list[Transfer]:
        """Transfers sent or received by a bank link, newest first."""
        with self._store.snapshot():
            return self._store.transfers.find_by_bank(bank_id)
