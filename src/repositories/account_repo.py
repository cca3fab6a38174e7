"""Account repository for database operations."""

import sqlite3

from src.models.account import Account
from src.models.exceptions import AccountAlreadyExistsError
from src.utils.ids import new_id


class AccountRepository:
    """Repository for Account data access operations."""

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize the repository with a database connection.

        Args:
            conn: SQLite database connection
        """
        self._conn = conn
        self._conn.row_factory = sqlite3.Row

    def create_table(self) -> None:
        """Create the Accounts table if it doesn't exist."""
        cursor = self._conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Accounts (
                id TEXT PRIMARY KEY,
                Name TEXT,
                OfficialName TEXT,
                Mask TEXT,
                Type TEXT,
                Subtype TEXT,
                Available INTEGER,
                Current INTEGER
            )
        """
        )
        self._conn.commit()

    def _from_row(self, row: sqlite3.Row) -> Account:
        return Account(
            id=row["id"],
            name=row["Name"],
            official_name=row["OfficialName"],
            mask=row["Mask"],
            type=row["Type"],
            subtype=row["Subtype"],
            available_balance=row["Available"],
            current_balance=row["Current"],
        )

    def create(self, account: Account) -> Account:
        """
        Create a new account.

        Args:
            account: The Account object to create; a fresh id is assigned if id is None

        Returns:
            The stored Account

        Raises:
            AccountAlreadyExistsError: If an account with the same id already exists
        """
        account_id = account.id or new_id("account")
        cursor = self._conn.cursor()
        try:
            cursor.execute(
                """
                INSERT INTO Accounts (id, Name, OfficialName, Mask, Type, Subtype, Available, Current)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    account_id,
                    account.name,
                    account.official_name,
                    account.mask,
                    account.type,
                    account.subtype,
                    account.available_balance,
                    account.current_balance,
                ),
            )
        except sqlite3.IntegrityError:
            raise AccountAlreadyExistsError(f"Account {account_id} already exists")
        return self.find_by_id(account_id)

    def find_by_id(self, account_id: str) -> Account | None:
        """
        Find an account by id.

        Args:
            account_id: The account id to search for

        Returns:
            Account object if found, None otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute(
            "SELECT id, Name, OfficialName, Mask, Type, Subtype, Available, Current FROM Accounts WHERE id = ?",
            (account_id,),
        )
        row = cursor.fetchone()

        if row is None:
            return None

        return self._from_row(row)

    def find_all(self) -> list[Account]:
        """Return every account in insertion order."""
        cursor = self._conn.cursor()
        cursor.execute(
            "SELECT id, Name, OfficialName, Mask, Type, Subtype, Available, Current FROM Accounts ORDER BY rowid"
        )
        return [self._from_row(row) for row in cursor.fetchall()]

    def exists(self, account_id: str) -> bool:
        """
        Check if an account exists.

        Args:
            account_id: The account id to check

        Returns:
            True if the account exists, False otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute("SELECT 1 FROM Accounts WHERE id = ?", (account_id,))
        return cursor.fetchone() is not None

    def update_balances(self, account_id: str, delta: int) -> Account | None:
        """
        Add delta to both the available and the current balance.

        Args:
            account_id: The account id to update
            delta: The amount in cents to add (can be negative)

        Returns:
            The updated Account, or None if no such account exists
        """
        cursor = self._conn.cursor()
        cursor.execute(
            "UPDATE Accounts SET Available = Available + ?, Current = Current + ? WHERE id = ?",
            (delta, delta, account_id),
        )
        if cursor.rowcount == 0:
            return None
        return self.find_by_id(account_id)
