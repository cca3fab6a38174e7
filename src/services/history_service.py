"""Transaction history assembly for one account."""

from datetime import datetime, time, timezone

from src.models.transaction import Transaction
from src.models.transfer import Transfer
from src.models.views import HistoryEntry
from src.store import EntityStore

DEBIT = "debit"
CREDIT = "credit"


def _from_transaction(txn: Transaction) -> HistoryEntry:
    return HistoryEntry(
        id=txn.id,
        name=txn.name,
        amount=txn.amount,
        date=datetime.combine(txn.date, time.min, tzinfo=timezone.utc),
        category=txn.category,
        channel=txn.payment_channel,
        pending=txn.pending,
        type=DEBIT if txn.is_debit else CREDIT,
        source="external",
    )


def _from_transfer(transfer: Transfer, bank_id: str) -> HistoryEntry:
    # The queried bank's side decides the sign.
    outgoing = transfer.sender_bank_id == bank_id
    return HistoryEntry(
        id=transfer.id,
        name=transfer.name,
        amount=-transfer.amount if outgoing else transfer.amount,
        date=transfer.created_at,
        category=transfer.category,
        channel=transfer.channel,
        pending=False,
        type=DEBIT if outgoing else CREDIT,
        source="transfer",
    )


class HistoryService:
    """Merges the external activity feed with the transfer ledger."""

    def __init__(self, store: EntityStore):
        self._store = store

    def get_history(self, account_id: str, bank_id: str) -> list[HistoryEntry]:
        """
        Build the full history of an account, newest first.

        External entries come before transfer entries that share the same
        timestamp. The result is never paginated here.

        Args:
            account_id: Account whose external feed is included
            bank_id: Bank link whose sent and received transfers are included

        Returns:
            len(external feed) + len(transfers involving bank_id) entries
        """
        with self._store.snapshot():
            transactions = self._store.transactions.find_by_account(account_id)
            transfers = self._store.transfers.find_by_bank(bank_id)

        entries = [_from_transaction(txn) for txn in transactions]
        entries.extend(_from_transfer(transfer, bank_id) for transfer in transfers)
        return sorted(entries, key=lambda entry: entry.date, reverse=True)

    def get_transactions(self, access_token: str) -> list[HistoryEntry]:
        """External feed of the bank holding ``access_token``; empty if unknown."""
        with self._store.snapshot():
            bank = self._store.banks.find_by_access_token(access_token)
            if bank is None:
                return []
            transactions = self._store.transactions.find_by_account(bank.account_id)
        return [_from_transaction(txn) for txn in transactions]
