"""Demo data seeded into a fresh store at startup."""

import logging
import random
from datetime import date, datetime, timedelta, timezone

from src.models.account import Account
from src.models.bank import Bank
from src.models.institution import Institution
from src.models.transaction import Transaction
from src.models.transfer import Transfer
from src.models.user import User
from src.store import EntityStore
from src.utils.ids import encode_shareable_id
from src.utils.money import to_cents

logger = logging.getLogger(__name__)

PAYMENT_API = "https://api-sandbox.dwolla.com"

INSTITUTIONS = (
    Institution(
        id="ins_56",
        name="Chase",
        primary_color="0071ce",
        url="https://www.chase.com",
        products=("assets", "auth", "balance", "transactions", "identity"),
    ),
    Institution(
        id="ins_127989",
        name="Bank of America",
        primary_color="e31837",
        url="https://www.bankofamerica.com",
        products=("assets", "auth", "balance", "transactions", "identity"),
    ),
    Institution(
        id="ins_116944",
        name="Wells Fargo",
        primary_color="d71e28",
        url="https://www.wellsfargo.com",
        products=("assets", "auth", "balance", "transactions", "identity"),
    ),
)

USERS = (
    User(
        id="user-1",
        email="demo@banking.com",
        password="demo12345",
        first_name="John",
        last_name="Doe",
        address1="123 Main Street",
        city="San Francisco",
        state="CA",
        postal_code="94102",
        date_of_birth="1990-01-15",
        ssn="***-**-1234",
        payment_customer_id="customer-1",
        payment_customer_url=f"{PAYMENT_API}/customers/customer-1",
    ),
    User(
        id="user-2",
        email="jane.smith@example.com",
        password="password123",
        first_name="Jane",
        last_name="Smith",
        address1="456 Oak Avenue",
        city="Los Angeles",
        state="CA",
        postal_code="90001",
        date_of_birth="1985-05-20",
        ssn="***-**-5678",
        payment_customer_id="customer-2",
        payment_customer_url=f"{PAYMENT_API}/customers/customer-2",
    ),
)

ACCOUNTS = (
    Account(
        id="account-chase-001",
        name="Chase Checking",
        official_name="Chase Total Checking",
        mask="4321",
        type="depository",
        subtype="checking",
        available_balance=to_cents("15420.50"),
        current_balance=to_cents("15420.50"),
    ),
    Account(
        id="account-bofa-001",
        name="BofA Savings",
        official_name="Bank of America Advantage Savings",
        mask="8765",
        type="depository",
        subtype="savings",
        available_balance=to_cents("8750.25"),
        current_balance=to_cents("8750.25"),
    ),
    # Credit card: current balance is the amount owed.
    Account(
        id="account-wells-001",
        name="Wells Fargo Credit",
        official_name="Wells Fargo Platinum Credit Card",
        mask="1234",
        type="credit",
        subtype="credit card",
        available_balance=to_cents("4580.00"),
        current_balance=to_cents("-1420.00"),
    ),
)

# (bank id, account id, short name, user id, institution id)
_BANK_LINKS = (
    ("bank-1", "account-chase-001", "chase", "user-1", "ins_56"),
    ("bank-2", "account-bofa-001", "bofa", "user-1", "ins_127989"),
    ("bank-3", "account-wells-001", "wells", "user-1", "ins_116944"),
)

BANKS = tuple(
    Bank(
        id=bank_id,
        account_id=account_id,
        item_id=f"item-{short}-1",
        user_id=user_id,
        access_token=f"access-token-{short}",
        funding_source_url=f"{PAYMENT_API}/funding-sources/funding-{n}",
        shareable_id=encode_shareable_id(account_id),
        institution_id=institution_id,
    )
    for n, (bank_id, account_id, short, user_id, institution_id) in enumerate(_BANK_LINKS, start=1)
)

CATEGORIES = ("Food and Drink", "Travel", "Transfer", "Shopping", "Entertainment", "Bills", "Healthcare")
PAYMENT_CHANNELS = ("online", "in store", "other")
MERCHANTS = (
    "Starbucks",
    "Whole Foods",
    "Amazon",
    "Netflix",
    "Uber",
    "Shell Gas Station",
    "CVS Pharmacy",
    "Target",
    "McDonald's",
    "Best Buy",
    "Home Depot",
    "Costco",
    "Walmart",
    "Delta Airlines",
    "Marriott Hotel",
    "Apple Store",
    "Spotify",
    "AT&T",
    "Pacific Gas & Electric",
    "California Water Service",
)
FEED_ACCOUNTS = ("account-chase-001", "account-bofa-001")
FEED_SIZE = 60
FEED_DAYS = 90


def generate_transactions(today: date, seed: int = 42, count: int = FEED_SIZE) -> list[Transaction]:
    """
    Generate the external activity feed for the last FEED_DAYS days.

    Roughly one in five entries is a credit (refund or deposit, positive
    amount); the rest are purchases (negative amount). The first three
    generated entries are pending. The result is sorted by date descending.

    Args:
        today: The most recent possible transaction date
        seed: Random seed, so that a given day always produces the same feed
        count: Number of transactions to generate

    Returns:
        List of unsaved transactions with ids 'transaction-1'..'transaction-N'
    """
    rng = random.Random(seed)
    transactions = []
    for i in range(count):
        amount = rng.randint(500, 50500)
        is_credit = rng.random() > 0.8
        transactions.append(
            Transaction(
                id=f"transaction-{i + 1}",
                account_id=rng.choice(FEED_ACCOUNTS),
                name=rng.choice(MERCHANTS),
                amount=amount if is_credit else -amount,
                date=today - timedelta(days=rng.randrange(FEED_DAYS)),
                category=rng.choice(CATEGORIES),
                payment_channel=rng.choice(PAYMENT_CHANNELS),
                pending=i < 3,
            )
        )
    return sorted(transactions, key=lambda txn: txn.date, reverse=True)


def historical_transfers(now: datetime) -> list[Transfer]:
    """Two transfers between the demo banks, 5 and 12 days before ``now``."""
    return [
        Transfer(
            id="transfer-1",
            name="Transfer to Jane Smith",
            amount=to_cents("250.00"),
            sender_id="user-1",
            sender_bank_id="bank-1",
            receiver_id="user-2",
            receiver_bank_id="bank-2",
            email="jane.smith@example.com",
            created_at=now - timedelta(days=5),
        ),
        Transfer(
            id="transfer-2",
            name="Received from Freelance Work",
            amount=to_cents("1500.00"),
            sender_id="user-2",
            sender_bank_id="bank-2",
            receiver_id="user-1",
            receiver_bank_id="bank-1",
            email="demo@banking.com",
            created_at=now - timedelta(days=12),
        ),
    ]


def load_demo_data(store: EntityStore, now: datetime | None = None, seed: int = 42) -> None:
    """
    Load the demo data set into an empty store.

    Institutions are not seeded here; pass INSTITUTIONS when opening the store.

    Args:
        store: The store to fill
        now: Reference time for relative dates (default: now, UTC)
        seed: Random seed for the generated activity feed
    """
    now = now or datetime.now(timezone.utc)
    with store.transaction():
        for user in USERS:
            store.users.create(user)
        for account in ACCOUNTS:
            store.accounts.create(account)
        for bank in BANKS:
            store.banks.create(bank)
        for txn in generate_transactions(now.date(), seed=seed):
            store.transactions.create(txn)
        for transfer in historical_transfers(now):
            store.transfers.create(transfer)
    logger.info(
        "Seeded demo data: %d users, %d accounts, %d banks, %d transactions",
        len(USERS),
        len(ACCOUNTS),
        len(BANKS),
        FEED_SIZE,
    )
