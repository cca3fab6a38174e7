"""Account aggregation over a user's bank links."""

import logging

from src.models.exceptions import BankNotFoundError, InconsistentBankError
from src.models.views import AccountDetail, AccountsSummary, AccountView
from src.services.history_service import HistoryService
from src.store import EntityStore

logger = logging.getLogger(__name__)


class AccountService:
    """Read-only views of accounts, balances and totals."""

    def __init__(self, store: EntityStore, history: HistoryService):
        """
        Initialize the AccountService.

        Args:
            store: The entity store
            history: Assembler used for single-account detail pages
        """
        self._store = store
        self._history = history

    def list_accounts(self, user_id: str) -> AccountsSummary:
        """
        List every resolvable account of a user with totals.

        Bank links whose account or institution is missing are skipped and
        logged; they never fail the listing. Unknown users get an empty summary.

        Args:
            user_id: The owning user

        Returns:
            AccountsSummary in bank-link order, where total_current_balance is
            the sum of current_balance over the returned accounts
        """
        views = []
        with self._store.snapshot():
            for bank in self._store.banks.find_by_user(user_id):
                account = self._store.accounts.find_by_id(bank.account_id)
                institution = self._store.institutions.find_by_id(bank.institution_id)
                if account is None or institution is None:
                    logger.warning(
                        "Skipping inconsistent bank %s (account %s, institution %s)",
                        bank.id,
                        bank.account_id,
                        bank.institution_id,
                    )
                    continue
                views.append(AccountView.build(account, bank, institution))

        return AccountsSummary(
            accounts=views,
            total_banks=len(views),
            total_current_balance=sum(view.current_balance for view in views),
        )

    def get_account(self, bank_id: str) -> AccountDetail:
        """
        Get one account with its merged transaction history.

        Args:
            bank_id: The bank link of the account

        Returns:
            AccountDetail with the account view and its full history

        Raises:
            BankNotFoundError: If the bank link doesn't exist
            InconsistentBankError: If its account or institution is missing
        """
        with self._store.snapshot():
            bank = self._store.banks.find_by_id(bank_id)
            if bank is None:
                raise BankNotFoundError(f"Bank {bank_id} not found")

            account = self._store.accounts.find_by_id(bank.account_id)
            institution = self._store.institutions.find_by_id(bank.institution_id)
            if account is None:
                raise InconsistentBankError(f"Account {bank.account_id} of bank {bank_id} not found")
            if institution is None:
                raise InconsistentBankError(
                    f"Institution {bank.institution_id} of bank {bank_id} not found"
                )

            transactions = self._history.get_history(account.id, bank.id)

        return AccountDetail(
            account=AccountView.build(account, bank, institution),
            transactions=transactions,
        )
