"""Shared pytest fixtures for bankapp tests."""

from decimal import Decimal
import logging
import pytest

from bankapp.database.factories import create_memory_database
from bankapp.domain.account_directory import AccountDirectory, AccountNumberSequence
from bankapp.domain.bank import BankService
from bankapp.domain.session import UserSession
from bankapp.domain.user_directory import UserDirectory


@pytest.fixture
def temp_db():
    """Create a fresh in-memory database for testing."""
    db = create_memory_database()
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()


@pytest.fixture
def user_directory(temp_db):
    """Create a UserDirectory with a temporary database."""
    return UserDirectory(temp_db)


@pytest.fixture
def account_directory(temp_db):
    """Create an AccountDirectory with its own number sequence."""
    return AccountDirectory(temp_db, AccountNumberSequence())


@pytest.fixture
def bank(temp_db):
    """Create a BankService with a temporary database."""
    return BankService(temp_db)


@pytest.fixture
def session():
    """Create an unauthenticated session."""
    return UserSession()


@pytest.fixture
def sample_user(temp_db):
    """Create a sample user directly in the database."""
    return temp_db.create_user(username="alice", password="pw1")


@pytest.fixture
def alice_session(bank):
    """Register alice and return her logged-in session."""
    session = bank.new_session()
    bank.register(session, "alice", "pw1")
    return session


@pytest.fixture
def savings_account(bank, alice_session):
    """Open a savings account with 100 for alice."""
    return bank.open_account(alice_session, "Alice", "savings", Decimal("100"))


@pytest.fixture
def checking_account(bank, alice_session):
    """Open a checking account with 100 for alice."""
    return bank.open_account(alice_session, "Alice", "checking", Decimal("100"))


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    yield

    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("bankapp").setLevel(logging.NOTSET)
