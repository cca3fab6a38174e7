"""The ledger facade: one store, one session, all services."""

import logging
from datetime import datetime
from typing import Callable

from config.settings import Settings
from src.data import fixtures
from src.models.bank import Bank
from src.models.transfer import Transfer
from src.models.user import User
from src.models.views import AccountDetail, AccountsSummary
from src.services.account_service import AccountService
from src.services.bank_service import BankService
from src.services.history_service import HistoryService
from src.services.session import SessionHolder
from src.services.transfer_service import TransferRequest, TransferService
from src.services.user_service import UserService
from src.store import EntityStore

logger = logging.getLogger(__name__)


class Ledger:
    """Synchronous entry point used by the front end.

    Build one per process (or per test) with ``Ledger.create``; nothing here
    is module-global.
    """

    def __init__(
        self,
        store: EntityStore,
        session: SessionHolder | None = None,
        clock: Callable[[], datetime] | None = None,
        default_institution_id: str = "ins_56",
        fallback_email: str | None = None,
    ):
        self.store = store
        self.session = session or SessionHolder()
        self.history = HistoryService(store)
        self.accounts = AccountService(store, self.history)
        self.banks = BankService(store, default_institution_id=default_institution_id)
        self.transfers = TransferService(store, clock=clock)
        self.users = UserService(store, self.session, fallback_email=fallback_email)

    @classmethod
    def create(cls, settings: Settings) -> "Ledger":
        """
        Open a store for ``settings`` and load the demo data into it if empty.

        Args:
            settings: Application settings

        Returns:
            A ready Ledger
        """
        store = EntityStore.open(settings.db_path, institutions=fixtures.INSTITUTIONS)
        if settings.seed_demo_data and store.is_empty():
            fixtures.load_demo_data(store, seed=settings.fixture_seed)
        logger.info("Ledger ready on %s", settings.db_path)
        return cls(
            store,
            default_institution_id=settings.default_institution_id,
            fallback_email=settings.demo_user_email,
        )

    def list_accounts(self, user_id: str) -> AccountsSummary:
        return self.accounts.list_accounts(user_id)

    def get_account(self, bank_id: str) -> AccountDetail:
        return self.accounts.get_account(bank_id)

    def list_banks(self, user_id: str) -> list[Bank]:
        return self.banks.list_banks(user_id)

    def get_bank_by_shareable_id(self, shareable_id: str) -> Bank:
        return self.banks.get_bank_by_shareable_id(shareable_id)

    def transfer(self, request: TransferRequest) -> Transfer:
        return self.transfers.submit(request)

    def create_bank_link(self, user_id: str, account_id: str, institution_id: str) -> Bank:
        return self.banks.create_bank_link(user_id, account_id, institution_id)

    def link_new_account(self, user_id: str, institution_id: str | None = None) -> Bank:
        return self.banks.link_new_account(user_id, institution_id)

    def sign_up(self, **profile) -> User:
        return self.users.sign_up(**profile)

    def sign_in(self, email: str, password: str) -> User:
        return self.users.sign_in(email, password)

    def logged_in_user(self) -> User | None:
        return self.users.get_logged_in_user()

    def logout(self) -> None:
        self.users.logout()

    def close(self) -> None:
        self.store.close()
