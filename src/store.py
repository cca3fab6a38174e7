"""In-memory entity store shared by the ledger services."""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator

from src.models.institution import Institution
from src.repositories.account_repo import AccountRepository
from src.repositories.bank_repo import BankRepository
from src.repositories.institution_directory import InstitutionDirectory
from src.repositories.transaction_repo import TransactionRepository
from src.repositories.transfer_repo import TransferRepository
from src.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


class EntityStore:
    """Owns the database connection, the repositories and the store lock.

    Repositories never commit on their own. Every mutation runs inside
    ``transaction()``, which holds the lock and commits or rolls back as one
    unit; composite reads run inside ``snapshot()`` so they never observe a
    half-applied write.
    """

    def __init__(self, conn: sqlite3.Connection, institutions: Iterable[Institution] = ()):
        """
        Initialize the store with a database connection.

        Args:
            conn: SQLite database connection
            institutions: Static institution reference data
        """
        self._conn = conn
        self._lock = threading.RLock()
        self._depth = 0
        self.users = UserRepository(conn)
        self.banks = BankRepository(conn)
        self.accounts = AccountRepository(conn)
        self.transactions = TransactionRepository(conn)
        self.transfers = TransferRepository(conn)
        self.institutions = InstitutionDirectory(institutions)

    @classmethod
    def open(cls, db_path: str = ":memory:", institutions: Iterable[Institution] = ()) -> "EntityStore":
        """
        Open a store and create its tables.

        Args:
            db_path: SQLite path; the default keeps everything in memory
            institutions: Static institution reference data

        Returns:
            A ready-to-use EntityStore
        """
        conn = sqlite3.connect(db_path, check_same_thread=False)
        store = cls(conn, institutions)
        store.create_tables()
        logger.debug("Opened entity store at %s", db_path)
        return store

    def create_tables(self) -> None:
        self.users.create_table()
        self.banks.create_table()
        self.accounts.create_table()
        self.transactions.create_table()
        self.transfers.create_table()

    @contextmanager
    def transaction(self) -> Iterator["EntityStore"]:
        """Run a block as one all-or-nothing unit of work.

        Nested calls join the outermost unit; only it commits or rolls back.
        """
        with self._lock:
            if self._depth:
                self._depth += 1
                try:
                    yield self
                finally:
                    self._depth -= 1
                return

            self._depth = 1
            try:
                yield self
            except BaseException:
                self._conn.rollback()
                raise
            else:
                self._conn.commit()
            finally:
                self._depth = 0

    @contextmanager
    def snapshot(self) -> Iterator["EntityStore"]:
        """Hold the store lock for a consistent multi-step read."""
        with self._lock:
            yield self

    def is_empty(self) -> bool:
        with self.snapshot():
            return self.users.count() == 0

    def close(self) -> None:
        with self._lock:
            self._conn.close()
