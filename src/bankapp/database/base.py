"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from bankapp.domain.entities import (
    Account,
    AccountType,
    Transaction,
    User,
)


class Database(ABC):
    """Abstract database interface for bankapp."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, username: str, password: str) -> User:
        """Create a new user."""
        pass

    @abstractmethod
    def get_user(self, username: str) -> Optional[User]:
        """Get user by exact username."""
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users in registration order."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        number: int,
        owner: str,
        holder_name: str,
        account_type: AccountType,
    ) -> Account:
        """Create an account with a zero balance."""
        pass

    @abstractmethod
    def get_account(self, number: int) -> Optional[Account]:
        """Get account by number."""
        pass

    @abstractmethod
    def list_accounts(self, owner: str) -> list[Account]:
        """List the accounts owned by a user in creation order."""
        pass

    @abstractmethod
    def count_accounts(self, owner: str) -> int:
        """Count the accounts owned by a user."""
        pass

    # Ledger operations
    @abstractmethod
    def post_transaction(self, transaction: Transaction, balance_after: Decimal) -> None:
        """Append a transaction and store the account's new balance.

        Both writes happen in a single commit.
        """
        pass

    @abstractmethod
    def list_transactions(self, account_number: int) -> list[Transaction]:
        """List an account's transactions in append order."""
        pass

    @abstractmethod
    def count_transactions(self, account_number: int) -> int:
        """Count an account's transactions."""
        pass
