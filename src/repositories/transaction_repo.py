"""Transaction repository for the external activity feed."""

import sqlite3
from datetime import date

from src.models.transaction import Transaction
from src.utils.ids import new_id


class TransactionRepository:
    """Repository for externally-sourced Transaction records.

    The feed is read-only once seeded; rows come back in insertion order.
    """

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize the repository with a database connection.

        Args:
            conn: SQLite database connection
        """
        self._conn = conn
        self._conn.row_factory = sqlite3.Row

    def create_table(self) -> None:
        """Create the Transactions table if it doesn't exist."""
        cursor = self._conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Transactions (
                id TEXT PRIMARY KEY,
                AccountID TEXT,
                Name TEXT,
                Amount INTEGER,
                Date TEXT,
                Category TEXT,
                Channel TEXT,
                Pending INTEGER,
                LogoURL TEXT
            )
        """
        )
        self._conn.commit()

    def _from_row(self, row: sqlite3.Row) -> Transaction:
        return Transaction(
            id=row["id"],
            account_id=row["AccountID"],
            name=row["Name"],
            amount=row["Amount"],
            date=date.fromisoformat(row["Date"]),
            category=row["Category"],
            payment_channel=row["Channel"],
            pending=bool(row["Pending"]),
            logo_url=row["LogoURL"],
        )

    def create(self, txn: Transaction) -> Transaction:
        """
        Append a transaction to the feed.

        Args:
            txn: The Transaction object to create; a fresh id is assigned if id is None

        Returns:
            The stored Transaction
        """
        txn_id = txn.id or new_id("transaction")
        cursor = self._conn.cursor()
        cursor.execute(
            """
            INSERT INTO Transactions (id, AccountID, Name, Amount, Date, Category, Channel, Pending, LogoURL)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                txn_id,
                txn.account_id,
                txn.name,
                txn.amount,
                txn.date.isoformat(),
                txn.category,
                txn.payment_channel,
                int(txn.pending),
                txn.logo_url,
            ),
        )
        return self.find_by_id(txn_id)

    def find_by_id(self, txn_id: str) -> Transaction | None:
        """
        Find a transaction by id.

        Args:
            txn_id: The transaction id to search for

        Returns:
            Transaction object if found, None otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute(
            """SELECT id, AccountID, Name, Amount, Date, Category, Channel, Pending, LogoURL
               FROM Transactions WHERE id = ?""",
            (txn_id,),
        )
        row = cursor.fetchone()

        if row is None:
            return None

        return self._from_row(row)

    def find_by_account(self, account_id: str) -> list[Transaction]:
        """
        Find all transactions for an account.

        Args:
            account_id: The account id to search for

        Returns:
            List of transactions in stored order
        """
        cursor = self._conn.cursor()
        cursor.execute(
            """SELECT id, AccountID, Name, Amount, Date, Category, Channel, Pending, LogoURL
               FROM Transactions WHERE AccountID = ? ORDER BY rowid""",
            (account_id,),
        )
        return [self._from_row(row) for row in cursor.fetchall()]
