"""Tests for BankService linking and lookup."""

from datetime import datetime, timezone

import pytest

from src.data import fixtures
from src.models.account import Account
from src.models.bank import Bank
from src.models.exceptions import (
    AccountAlreadyLinkedError,
    AccountNotFoundError,
    BankNotFoundError,
    InstitutionNotFoundError,
    UserNotFoundError,
)
from src.services.bank_service import BankService
from src.store import EntityStore
from src.utils.ids import encode_shareable_id

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    """Create an in-memory store loaded with the demo data."""
    store = EntityStore.open(":memory:", institutions=fixtures.INSTITUTIONS)
    fixtures.load_demo_data(store, now=NOW)
    yield store
    store.close()


@pytest.fixture
def bank_service(store):
    return BankService(store)


def add_account(store, account_id):
    with store.transaction():
        store.accounts.create(
            Account(
                id=account_id,
                name="Savings",
                official_name="Plaid Savings",
                mask="9999",
                type="depository",
                subtype="savings",
                available_balance=5000,
                current_balance=5000,
            )
        )


def test_list_banks_in_link_order(bank_service):
    assert [bank.id for bank in bank_service.list_banks("user-1")] == ["bank-1", "bank-2", "bank-3"]
    assert bank_service.list_banks("user-2") == []
    assert bank_service.list_banks("nobody") == []


def test_get_bank(bank_service):
    assert bank_service.get_bank("bank-2").account_id == "account-bofa-001"

    with pytest.raises(BankNotFoundError):
        bank_service.get_bank("nope")


def test_get_bank_by_account_id(bank_service):
    assert bank_service.get_bank_by_account_id("account-wells-001").id == "bank-3"
    assert bank_service.get_bank_by_account_id("nope") is None


def test_create_bank_link(bank_service, store):
    add_account(store, "account-savings")

    bank = bank_service.create_bank_link("user-2", "account-savings", "ins_127989")

    assert bank.id.startswith("bank-")
    assert bank.user_id == "user-2"
    assert bank.institution_id == "ins_127989"
    assert bank.shareable_id == encode_shareable_id("account-savings")
    assert bank.access_token
    assert bank.funding_source_url.startswith("https://")
    assert [b.id for b in bank_service.list_banks("user-2")] == [bank.id]


def test_create_bank_link_keeps_given_credentials(bank_service, store):
    add_account(store, "account-savings")

    bank = bank_service.create_bank_link(
        "user-2",
        "account-savings",
        "ins_56",
        access_token="access-token-savings",
        funding_source_url="https://example.com/funding/1",
    )

    assert bank.access_token == "access-token-savings"
    assert bank.funding_source_url == "https://example.com/funding/1"


def test_account_cannot_be_linked_twice(bank_service):
    with pytest.raises(AccountAlreadyLinkedError):
        bank_service.create_bank_link("user-2", "account-chase-001", "ins_56")

    assert bank_service.get_bank_by_account_id("account-chase-001").user_id == "user-1"


@pytest.mark.parametrize(
    "user_id, account_id, institution_id, error",
    [
        ("nobody", "account-savings", "ins_56", UserNotFoundError),
        ("user-2", "account-missing", "ins_56", AccountNotFoundError),
        ("user-2", "account-savings", "ins_0", InstitutionNotFoundError),
    ],
)
def test_create_bank_link_references_must_exist(bank_service, store, user_id, account_id, institution_id, error):
    add_account(store, "account-savings")

    with pytest.raises(error):
        bank_service.create_bank_link(user_id, account_id, institution_id)

    assert bank_service.list_banks("user-2") == []


def test_get_bank_by_shareable_id(bank_service, store):
    shareable_id = encode_shareable_id("account-bofa-001")

    assert bank_service.get_bank_by_shareable_id(shareable_id).id == "bank-2"


def test_shareable_id_falls_back_to_decoded_account(bank_service, store):
    """A shareable id that decodes to a linked account still resolves."""
    add_account(store, "account-savings")
    with store.transaction():
        bank = store.banks.create(
            Bank(
                id="bank-odd",
                account_id="account-savings",
                item_id="item",
                user_id="user-2",
                access_token="token",
                funding_source_url="https://example.com/funding",
                shareable_id="legacy-share",
                institution_id="ins_56",
            )
        )

    assert bank_service.get_bank_by_shareable_id("legacy-share") == bank
    assert bank_service.get_bank_by_shareable_id(encode_shareable_id("account-savings")) == bank


@pytest.mark.parametrize("shareable_id", ["", "a", "not-a-bank", encode_shareable_id("account-missing")])
def test_get_bank_by_unknown_shareable_id(bank_service, shareable_id):
    with pytest.raises(BankNotFoundError):
        bank_service.get_bank_by_shareable_id(shareable_id)


def test_get_institution(bank_service):
    assert bank_service.get_institution("ins_116944").name == "Wells Fargo"

    with pytest.raises(InstitutionNotFoundError):
        bank_service.get_institution("ins_0")


def test_link_new_account(bank_service, store):
    bank = bank_service.link_new_account("user-2", "ins_127989")

    account = store.accounts.find_by_id(bank.account_id)
    assert account.name == "Bank of America Checking"
    assert account.available_balance == 0
    assert account.current_balance == 0
    assert account.type == "depository"
    assert len(account.mask) == 4
    assert bank.institution_id == "ins_127989"


def test_link_new_account_uses_default_institution(store):
    bank = BankService(store, default_institution_id="ins_116944").link_new_account("user-2")

    assert bank.institution_id == "ins_116944"


def test_link_new_account_for_unknown_user_leaves_no_account(bank_service, store):
    before = store.accounts.find_all()

    with pytest.raises(UserNotFoundError):
        bank_service.link_new_account("nobody")

    assert store.accounts.find_all() == before
