"""Bank link repository for database operations."""

import sqlite3

from src.models.bank import Bank
from src.models.exceptions import AccountAlreadyLinkedError
from src.utils.ids import new_id

_COLUMNS = "id, AccountID, ItemID, UserID, AccessToken, FundingSourceURL, ShareableID, InstitutionID"


class BankRepository:
    """Repository for Bank link data access operations."""

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize the repository with a database connection.

        Args:
            conn: SQLite database connection
        """
        self._conn = conn
        self._conn.row_factory = sqlite3.Row

    def create_table(self) -> None:
        """Create the Banks table if it doesn't exist.

        AccountID is unique: an account has at most one bank link.
        """
        cursor = self._conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Banks (
                id TEXT PRIMARY KEY,
                AccountID TEXT UNIQUE,
                ItemID TEXT,
                UserID TEXT REFERENCES Users(id),
                AccessToken TEXT,
                FundingSourceURL TEXT,
                ShareableID TEXT,
                InstitutionID TEXT
            )
        """
        )
        self._conn.commit()

    def _from_row(self, row: sqlite3.Row) -> Bank:
        return Bank(
            id=row["id"],
            account_id=row["AccountID"],
            item_id=row["ItemID"],
            user_id=row["UserID"],
            access_token=row["AccessToken"],
            funding_source_url=row["FundingSourceURL"],
            shareable_id=row["ShareableID"],
            institution_id=row["InstitutionID"],
        )

    def _find_one(self, column: str, value: str) -> Bank | None:
        cursor = self._conn.cursor()
        cursor.execute(f"SELECT {_COLUMNS} FROM Banks WHERE {column} = ?", (value,))
        row = cursor.fetchone()
        if row is None:
            return None
        return self._from_row(row)

    def create(self, bank: Bank) -> Bank:
        """
        Create a new bank link.

        Args:
            bank: The Bank object to create; a fresh id is assigned if id is None

        Returns:
            The stored Bank

        Raises:
            AccountAlreadyLinkedError: If the account already has a bank link
        """
        bank_id = bank.id or new_id("bank")
        cursor = self._conn.cursor()
        try:
            cursor.execute(
                f"INSERT INTO Banks ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    bank_id,
                    bank.account_id,
                    bank.item_id,
                    bank.user_id,
                    bank.access_token,
                    bank.funding_source_url,
                    bank.shareable_id,
                    bank.institution_id,
                ),
            )
        except sqlite3.IntegrityError:
            raise AccountAlreadyLinkedError(
                f"Account {bank.account_id} is already linked (or bank {bank_id} exists)"
            )
        return self.find_by_id(bank_id)

    def find_by_id(self, bank_id: str) -> Bank | None:
        """
        Find a bank link by id.

        Args:
            bank_id: The bank link id to search for

        Returns:
            Bank object if found, None otherwise
        """
        return self._find_one("id", bank_id)

    def find_by_account_id(self, account_id: str) -> Bank | None:
        """Find the bank link of an account, if any."""
        return self._find_one("AccountID", account_id)

    def find_by_shareable_id(self, shareable_id: str) -> Bank | None:
        """Find a bank link by the id its owner shares to receive transfers."""
        return self._find_one("ShareableID", shareable_id)

    def find_by_access_token(self, access_token: str) -> Bank | None:
        """Find a bank link by its access credential."""
        return self._find_one("AccessToken", access_token)

    def find_by_user(self, user_id: str) -> list[Bank]:
        """
        Find all bank links of a user.

        Args:
            user_id: The owning user id

        Returns:
            List of banks in link order
        """
        cursor = self._conn.cursor()
        cursor.execute(
            f"SELECT {_COLUMNS} FROM Banks WHERE UserID = ? ORDER BY rowid",
            (user_id,),
        )
        return [self._from_row(row) for row in cursor.fetchall()]
