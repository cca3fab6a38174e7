"""Tests for UserService and the session holder."""

from datetime import datetime, timezone

import pytest

from src.data import fixtures
from src.models.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from src.services.session import SessionHolder
from src.services.user_service import UserService, mask_ssn
from src.store import EntityStore

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    """Create an in-memory store loaded with the demo data."""
    store = EntityStore.open(":memory:", institutions=fixtures.INSTITUTIONS)
    fixtures.load_demo_data(store, now=NOW)
    yield store
    store.close()


@pytest.fixture
def session():
    return SessionHolder()


@pytest.fixture
def user_service(store, session):
    return UserService(store, session)


@pytest.mark.parametrize(
    "ssn, expected",
    [("123-45-6789", "***-**-6789"), ("123456789", "***-**-6789"), ("1234", "***-**-1234")],
)
def test_mask_ssn(ssn, expected):
    assert mask_ssn(ssn) == expected


def test_sign_up_creates_user_and_session(user_service, session, store):
    user = user_service.sign_up(
        email="new@example.com",
        password="secret",
        first_name="Ada",
        last_name="Lovelace",
        ssn="111-22-3333",
    )

    assert user.id.startswith("user-")
    assert user.full_name == "Ada Lovelace"
    assert user.ssn == "***-**-3333"
    assert user.payment_customer_url.endswith(user.payment_customer_id)
    assert session.get().user_id == user.id
    assert store.users.find_by_email("new@example.com") == user


def test_sign_up_duplicate_email(user_service, session):
    with pytest.raises(UserAlreadyExistsError):
        user_service.sign_up(email="demo@banking.com", password="x", first_name="A", last_name="B")

    assert session.get() is None


def test_sign_in(user_service, session):
    user = user_service.sign_in("demo@banking.com", "demo12345")

    assert user.id == "user-1"
    assert session.get().user_id == "user-1"
    assert user_service.get_logged_in_user() == user


def test_sign_in_unknown_email(user_service):
    with pytest.raises(UserNotFoundError):
        user_service.sign_in("ghost@example.com", "demo12345")


def test_sign_in_wrong_password(user_service, session):
    with pytest.raises(InvalidCredentialsError):
        user_service.sign_in("demo@banking.com", "wrong")

    assert session.get() is None


def test_sign_in_replaces_previous_session(user_service, session):
    first = user_service.sign_in("demo@banking.com", "demo12345")
    old_secret = session.get().secret

    user_service.sign_in("jane.smith@example.com", "password123")

    assert session.get().user_id == "user-2"
    assert session.get().secret != old_secret
    assert user_service.get_logged_in_user().id != first.id


def test_get_user(user_service):
    assert user_service.get_user("user-2").first_name == "Jane"

    with pytest.raises(UserNotFoundError):
        user_service.get_user("nobody")


def test_logout(user_service, session):
    user_service.sign_in("demo@banking.com", "demo12345")

    user_service.logout()

    assert session.get() is None
    assert user_service.get_logged_in_user() is None


def test_logged_in_user_falls_back_to_demo_user(store, session):
    """With nobody signed in, the configured demo user is returned."""
    user_service = UserService(store, session, fallback_email="demo@banking.com")

    assert user_service.get_logged_in_user().id == "user-1"

    user_service.sign_in("jane.smith@example.com", "password123")
    assert user_service.get_logged_in_user().id == "user-2"


def test_stale_session_falls_back(store, session):
    session.set("user-deleted")

    assert UserService(store, session).get_logged_in_user() is None
    assert UserService(store, session, fallback_email="demo@banking.com").get_logged_in_user().id == "user-1"
