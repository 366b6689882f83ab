"""Bank service: the operations offered to the command line layer."""

from decimal import Decimal
from typing import Any, Optional

from bankapp.config import BankConfig
from bankapp.database.base import Database
from bankapp.domain.account_directory import AccountDirectory, AccountNumberSequence
from bankapp.domain.entities import Account, AccountType, Transaction, User
from bankapp.domain.ledger import AccountLedger
from bankapp.domain.selector import select_account
from bankapp.domain.session import UserSession
from bankapp.domain.user_directory import UserDirectory


class BankService:
    """Entry point for all user-facing bank operations.

    Each bank owns its account number sequence, and every operation takes
    the caller's session explicitly. Banks and sessions therefore share no
    state with each other.
    """

    def __init__(self, db: Database, config: Optional[BankConfig] = None):
        """Initialize bank service.

        Args:
            db: Database instance
            config: Bank configuration (defaults if None)
        """
        self.db = db
        self.config = config if config is not None else BankConfig()
        self.users = UserDirectory(db)
        self.accounts = AccountDirectory(
            db,
            AccountNumberSequence(self.config.first_account_number),
            max_accounts_per_user=self.config.max_accounts_per_user,
        )

    def new_session(self) -> UserSession:
        return UserSession()

    # Identity
    def register(self, session: UserSession, username: str, password: str) -> User:
        return self.users.register(session, username, password)

    def login(self, session: UserSession, username: str, password: str) -> User:
        return self.users.login(session, username, password)

    def logout(self, session: UserSession) -> None:
        self.users.logout(session)

    # Accounts
    def open_account(
        self,
        session: UserSession,
        holder_name: str,
        account_type: str | AccountType,
        initial_deposit: Any,
    ) -> Account:
        """Open an account for the session user.

        Returns:
            Snapshot of the new account
        """
        user = session.require_user()
        ledger = AccountLedger.open(
            self.db,
            self.accounts,
            owner=user,
            holder_name=holder_name,
            account_type=account_type,
            initial_deposit=initial_deposit,
        )
        return ledger.account

    def list_owned_accounts(self, user: User) -> list[Account]:
        """List a user's accounts in creation order."""
        return self.accounts.accounts_for(user)

    def select(self, session: UserSession, account_number: str | int) -> Account:
        """Resolve one of the session user's accounts by number."""
        user = session.require_user()
        return select_account(self.list_owned_accounts(user), account_number)

    def ledger(self, session: UserSession, account_number: str | int) -> AccountLedger:
        """Return the ledger of one of the session user's accounts."""
        account = self.select(session, account_number)
        return AccountLedger(self.db, account.number)

    # Ledger operations
    def deposit(self, session: UserSession, account_number: str | int, amount: Any) -> Decimal:
        """Deposit into an owned account and return the new balance."""
        ledger = self.ledger(session, account_number)
        ledger.deposit(amount)
        return ledger.balance

    def withdraw(self, session: UserSession, account_number: str | int, amount: Any) -> bool:
        """Withdraw from an owned account.

        Raises:
            InsufficientFundsError: If amount exceeds the balance
        """
        return self.ledger(session, account_number).withdraw(amount)

    def check_balance(self, session: UserSession, account_number: str | int) -> Decimal:
        return self.select(session, account_number).balance

    def generate_statement(
        self, session: UserSession, account_number: str | int
    ) -> list[Transaction]:
        return self.ledger(session, account_number).statement()

    def calculate_interest(
        self, session: UserSession, account_number: str | int, rate: Any
    ) -> Decimal:
        """Accrue interest on an owned savings account and return the interest."""
        return self.ledger(session, account_number).calculate_interest(rate)
