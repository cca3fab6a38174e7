"""User repository for database operations."""

import sqlite3

from src.models.exceptions import UserAlreadyExistsError
from src.models.user import User
from src.utils.ids import new_id

_COLUMNS = (
    "id, Email, Password, FirstName, LastName, Address1, City, State, PostalCode, "
    "DateOfBirth, SSN, PaymentCustomerID, PaymentCustomerURL"
)


class UserRepository:
    """Repository for User data access operations."""

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize the repository with a database connection.

        Args:
            conn: SQLite database connection
        """
        self._conn = conn
        self._conn.row_factory = sqlite3.Row

    def create_table(self) -> None:
        """Create the Users table if it doesn't exist."""
        cursor = self._conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS Users (
                id TEXT PRIMARY KEY,
                Email TEXT UNIQUE,
                Password TEXT,
                FirstName TEXT,
                LastName TEXT,
                Address1 TEXT,
                City TEXT,
                State TEXT,
                PostalCode TEXT,
                DateOfBirth TEXT,
                SSN TEXT,
                PaymentCustomerID TEXT,
                PaymentCustomerURL TEXT
            )
        """
        )
        self._conn.commit()

    def _from_row(self, row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            email=row["Email"],
            password=row["Password"],
            first_name=row["FirstName"],
            last_name=row["LastName"],
            address1=row["Address1"],
            city=row["City"],
            state=row["State"],
            postal_code=row["PostalCode"],
            date_of_birth=row["DateOfBirth"],
            ssn=row["SSN"],
            payment_customer_id=row["PaymentCustomerID"],
            payment_customer_url=row["PaymentCustomerURL"],
        )

    def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: The User object to create; a fresh id is assigned if id is None

        Returns:
            The stored User

        Raises:
            UserAlreadyExistsError: If the email (or id) is already registered
        """
        user_id = user.id or new_id("user")
        cursor = self._conn.cursor()
        try:
            cursor.execute(
                f"INSERT INTO Users ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    user_id,
                    user.email,
                    user.password,
                    user.first_name,
                    user.last_name,
                    user.address1,
                    user.city,
                    user.state,
                    user.postal_code,
                    user.date_of_birth,
                    user.ssn,
                    user.payment_customer_id,
                    user.payment_customer_url,
                ),
            )
        except sqlite3.IntegrityError:
            raise UserAlreadyExistsError(f"User {user.email} already exists")
        return self.find_by_id(user_id)

    def find_by_id(self, user_id: str) -> User | None:
        """
        Find a user by id.

        Args:
            user_id: The user id to search for

        Returns:
            User object if found, None otherwise
        """
        cursor = self._conn.cursor()
        cursor.execute(f"SELECT {_COLUMNS} FROM Users WHERE id = ?", (user_id,))
        row = cursor.fetchone()
        if row is None:
            return None
        return self._from_row(row)

    def find_by_email(self, email: str) -> User | None:
        """Find a user by email address."""
        cursor = self._conn.cursor()
        cursor.execute(f"SELECT {_COLUMNS} FROM Users WHERE Email = ?", (email,))
        row = cursor.fetchone()
        if row is None:
            return None
        return self._from_row(row)

    def count(self) -> int:
        cursor = self._conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM Users")
        return cursor.fetchone()[0]
