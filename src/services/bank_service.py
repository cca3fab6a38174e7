"""Bank link service: listing, lookup and linking of accounts."""

import logging
import random

from src.models.account import Account
from src.models.bank import Bank
from src.models.exceptions import (
    AccountAlreadyLinkedError,
    AccountNotFoundError,
    BankNotFoundError,
    InstitutionNotFoundError,
    UserNotFoundError,
)
from src.models.institution import Institution
from src.store import EntityStore
from src.utils.ids import decode_shareable_id, encode_shareable_id, new_id

logger = logging.getLogger(__name__)

FUNDING_SOURCES_URL = "https://api-sandbox.dwolla.com/funding-sources"


class BankService:
    """Service layer for bank links."""

    def __init__(self, store: EntityStore, default_institution_id: str = "ins_56"):
        """
        Initialize the BankService.

        Args:
            store: The entity store
            default_institution_id: Institution used by link_new_account when
                none is given (default: Chase)
        """
        self._store = store
        self._default_institution_id = default_institution_id

    def list_banks(self, user_id: str) -> list[Bank]:
        """Return the user's bank links in link order (empty for unknown users)."""
        with self._store.snapshot():
            return self._store.banks.find_by_user(user_id)

    def get_bank(self, bank_id: str) -> Bank:
        """
        Get a bank link by id.

        Raises:
            BankNotFoundError: If the bank link doesn't exist
        """
        with self._store.snapshot():
            bank = self._store.banks.find_by_id(bank_id)
        if bank is None:
            raise BankNotFoundError(f"Bank {bank_id} not found")
        return bank

    def get_bank_by_account_id(self, account_id: str) -> Bank | None:
        with self._store.snapshot():
            return self._store.banks.find_by_account_id(account_id)

    def get_bank_by_shareable_id(self, shareable_id: str) -> Bank:
        """
        Resolve the id a user shares to receive transfers.

        Raises:
            BankNotFoundError: If no bank link carries this shareable id
        """
        with self._store.snapshot():
            bank = self._store.banks.find_by_shareable_id(shareable_id)
            if bank is None:
                account_id = decode_shareable_id(shareable_id)
                if account_id is not None:
                    bank = self._store.banks.find_by_account_id(account_id)
        if bank is None:
            raise BankNotFoundError(f"No bank found for shareable id {shareable_id}")
        return bank

    def get_institution(self, institution_id: str) -> Institution:
        """
        Look up an institution in the directory.

        Raises:
            InstitutionNotFoundError: If the id is unknown
        """
        institution = self._store.institutions.find_by_id(institution_id)
        if institution is None:
            raise InstitutionNotFoundError(f"Institution {institution_id} not found")
        return institution

    def create_bank_link(
        self,
        user_id: str,
        account_id: str,
        institution_id: str,
        access_token: str | None = None,
        funding_source_url: str | None = None,
    ) -> Bank:
        """
        Link an existing account to a user.

        Args:
            user_id: The owning user
            account_id: The account to link (at most one link per account)
            institution_id: The institution holding the account
            access_token: Access credential (generated if omitted)
            funding_source_url: Payment-network funding source (generated if omitted)

        Returns:
            The created Bank

        Raises:
            UserNotFoundError: If the user doesn't exist
            AccountNotFoundError: If the account doesn't exist
            InstitutionNotFoundError: If the institution is unknown
            AccountAlreadyLinkedError: If the account already has a bank link
        """
        with self._store.transaction():
            bank = self._link(user_id, account_id, institution_id, access_token, funding_source_url)
        logger.info("Linked account %s to user %s as bank %s", account_id, user_id, bank.id)
        return bank

    def link_new_account(
        self,
        user_id: str,
        institution_id: str | None = None,
        name: str = "Checking",
    ) -> Bank:
        """
        Open a zero-balance checking account and link it in one step.

        This is the sandbox counterpart of exchanging a public link token.

        Raises:
            UserNotFoundError: If the user doesn't exist
            InstitutionNotFoundError: If the institution is unknown
        """
        institution_id = institution_id or self._default_institution_id
        institution = self.get_institution(institution_id)
        # A failed link rolls back the account opened just before it.
        with self._store.transaction():
            account = self._store.accounts.create(
                Account(
                    id=None,
                    name=f"{institution.name} {name}",
                    official_name=f"{institution.name} {name}",
                    mask=f"{random.randrange(10000):04d}",
                    type="depository",
                    subtype="checking",
                    available_balance=0,
                    current_balance=0,
                )
            )
            bank = self._link(user_id, account.id, institution_id, None, None)
        logger.info("Opened account %s for user %s as bank %s", account.id, user_id, bank.id)
        return bank

    def _link(
        self,
        user_id: str,
        account_id: str,
        institution_id: str,
        access_token: str | None,
        funding_source_url: str | None,
    ) -> Bank:
        if self._store.users.find_by_id(user_id) is None:
            raise UserNotFoundError(f"User {user_id} not found")
        if not self._store.accounts.exists(account_id):
            raise AccountNotFoundError(f"Account {account_id} not found")
        if institution_id not in self._store.institutions:
            raise InstitutionNotFoundError(f"Institution {institution_id} not found")
        if self._store.banks.find_by_account_id(account_id) is not None:
            raise AccountAlreadyLinkedError(f"Account {account_id} is already linked")

        return self._store.banks.create(
            Bank(
                id=None,
                account_id=account_id,
                item_id=new_id("item"),
                user_id=user_id,
                access_token=access_token or new_id("access-token"),
                funding_source_url=funding_source_url or f"{FUNDING_SOURCES_URL}/{new_id('funding')}",
                shareable_id=encode_shareable_id(account_id),
                institution_id=institution_id,
            )
        )
