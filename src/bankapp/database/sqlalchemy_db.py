"""Generic SQLAlchemy database implementation."""

from typing import Optional
from decimal import Decimal
from sqlalchemy.orm import Session

from bankapp.database.base import Database
from bankapp.database.models import (
    User,
    Account,
    Transaction,
    create_session_factory,
)
from bankapp.database.mappers import (
    user_to_domain,
    account_to_domain,
    transaction_to_domain,
)
from bankapp.domain.entities import (
    User as DomainUser,
    Account as DomainAccount,
    AccountType,
    Transaction as DomainTransaction,
)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite://' for an
                in-memory database)
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _get_user_row(self, username: str) -> Optional[User]:
        session = self._get_session()
        return session.query(User).filter(User.username == username).first()

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    # User operations
    def create_user(self, username: str, password: str) -> DomainUser:
        """Create a new user."""
        session = self._get_session()
        if self._get_user_row(username) is not None:
            raise ValueError(f"User '{username}' already exists")
        user = User(username=username, password=password)
        session.add(user)
        session.commit()
        return user_to_domain(user)

    def get_user(self, username: str) -> Optional[DomainUser]:
        """Get user by exact username."""
        user = self._get_user_row(username)
        if user is None:
            return None
        return user_to_domain(user)

    def list_users(self) -> list[DomainUser]:
        """List all users in registration order."""
        session = self._get_session()
        users = session.query(User).order_by(User.id).all()
        return [user_to_domain(user) for user in users]

    # Account operations
    def create_account(
        self,
        number: int,
        owner: str,
        holder_name: str,
        account_type: AccountType,
    ) -> DomainAccount:
        """Create an account with a zero balance."""
        session = self._get_session()
        user = self._get_user_row(owner)
        if user is None:
            raise ValueError(f"User '{owner}' not found")
        if session.get(Account, number) is not None:
            raise ValueError(f"Account {number} already exists")

        account = Account(
            number=number,
            owner=user,
            holder_name=holder_name,
            account_type=account_type,
            balance=Decimal("0"),
        )
        session.add(account)
        session.commit()
        return account_to_domain(account)

    def get_account(self, number: int) -> Optional[DomainAccount]:
        """Get account by number."""
        session = self._get_session()
        account = session.get(Account, number)
        if account is None:
            return None
        return account_to_domain(account)

    def list_accounts(self, owner: str) -> list[DomainAccount]:
        """List the accounts owned by a user in creation order."""
        session = self._get_session()
        accounts = (
            session.query(Account)
            .join(User)
            .filter(User.username == owner)
            .order_by(Account.number)
            .all()
        )
        return [account_to_domain(acc) for acc in accounts]

    def count_accounts(self, owner: str) -> int:
        """Count the accounts owned by a user."""
        session = self._get_session()
        return session.query(Account).join(User).filter(User.username == owner).count()

    # Ledger operations
    def post_transaction(self, transaction: DomainTransaction, balance_after: Decimal) -> None:
        """Append a transaction and store the account's new balance."""
        session = self._get_session()
        account = session.get(Account, transaction.account_number)
        if account is None:
            raise ValueError(f"Account {transaction.account_number} not found")

        try:
            session.add(
                Transaction(
                    unique_id=transaction.id,
                    account_number=transaction.account_number,
                    kind=transaction.kind,
                    amount=transaction.amount,
                    timestamp=transaction.timestamp,
                )
            )
            account.balance = balance_after
            session.commit()
        except Exception:
            session.rollback()
            raise

    def list_transactions(self, account_number: int) -> list[DomainTransaction]:
        """List an account's transactions in append order."""
        session = self._get_session()
        transactions = (
            session.query(Transaction)
            .filter(Transaction.account_number == account_number)
            .order_by(Transaction.id)
            .all()
        )
        return [transaction_to_domain(txn) for txn in transactions]

    def count_transactions(self, account_number: int) -> int:
        """Count an account's transactions."""
        session = self._get_session()
        return (
            session.query(Transaction)
            .filter(Transaction.account_number == account_number)
            .count()
        )
