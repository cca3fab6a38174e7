"""User service: sign-up, sign-in and session lookup."""

import logging

from src.models.exceptions import (
    InvalidCredentialsError,
    UserNotFoundError,
)
from src.models.user import User
from src.services.session import SessionHolder
from src.store import EntityStore
from src.utils.ids import new_id

logger = logging.getLogger(__name__)

PAYMENT_CUSTOMERS_URL = "https://api-sandbox.dwolla.com/customers"


def mask_ssn(ssn: str) -> str:
    """Keep only the last four digits of a tax id, e.g. '***-**-1234'."""
    digits = "".join(ch for ch in ssn if ch.isdigit())
    return f"***-**-{digits[-4:]}"


class UserService:
    """Service layer for user accounts and the process session.

    Passwords are compared in plain text; this ledger stands in for a real
    identity provider and does not implement credential security.
    """

    def __init__(
        self,
        store: EntityStore,
        session: SessionHolder,
        fallback_email: str | None = None,
    ):
        """
        Initialize the UserService.

        Args:
            store: The entity store
            session: Holder of the signed-in user
            fallback_email: User returned by get_logged_in_user when nobody is
                signed in (the demo user); None disables the fallback
        """
        self._store = store
        self._session = session
        self._fallback_email = fallback_email

    def sign_up(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        address1: str = "",
        city: str = "",
        state: str = "",
        postal_code: str = "",
        date_of_birth: str = "",
        ssn: str = "",
    ) -> User:
        """
        Register a new user and sign them in.

        Returns:
            The created User

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        customer_id = new_id("customer")
        user = User(
            id=None,
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            address1=address1,
            city=city,
            state=state,
            postal_code=postal_code,
            date_of_birth=date_of_birth,
            ssn=mask_ssn(ssn) if ssn else "",
            payment_customer_id=customer_id,
            payment_customer_url=f"{PAYMENT_CUSTOMERS_URL}/{customer_id}",
        )
        with self._store.transaction():
            created = self._store.users.create(user)

        self._session.set(created.id)
        logger.info("User %s signed up", created.id)
        return created

    def sign_in(self, email: str, password: str) -> User:
        """
        Sign in with email and password.

        Raises:
            UserNotFoundError: If no user has this email
            InvalidCredentialsError: If the password does not match
        """
        with self._store.snapshot():
            user = self._store.users.find_by_email(email)

        if user is None:
            raise UserNotFoundError(f"User {email} not found")
        if user.password != password:
            raise InvalidCredentialsError("Invalid password")

        self._session.set(user.id)
        logger.info("User %s signed in", user.id)
        return user

    def get_user(self, user_id: str) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        with self._store.snapshot():
            user = self._store.users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    def get_logged_in_user(self) -> User | None:
        """Return the session user, else the fallback user, else None."""
        session = self._session.get()
        with self._store.snapshot():
            if session is not None:
                user = self._store.users.find_by_id(session.user_id)
                if user is not None:
                    return user
            if self._fallback_email:
                return self._store.users.find_by_email(self._fallback_email)
        return None

    def logout(self) -> None:
        self._session.clear()
