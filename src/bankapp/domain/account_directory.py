"""Account number assignment and per-user account limits."""

from bankapp.database.base import Database
from bankapp.domain.entities import Account, User
from bankapp.domain.errors import AccountLimitExceededError, account_limit_exceeded
from bankapp.logging import event_fields, get_logger

logger = get_logger(__name__)

DEFAULT_FIRST_ACCOUNT_NUMBER = 1001
DEFAULT_MAX_ACCOUNTS_PER_USER = 2


class AccountNumberSequence:
    """Strictly increasing account number generator.

    Numbers handed out are never reused, even if the account they were
    drawn for is never stored.
    """

    def __init__(self, start: int = DEFAULT_FIRST_ACCOUNT_NUMBER):
        self._next = start

    def next(self) -> int:
        number = self._next
        self._next += 1
        return number

    def peek(self) -> int:
        """Return the number the next call to next() will produce."""
        return self._next


class AccountDirectory:
    """Service for assigning account numbers and checking ownership limits."""

    def __init__(
        self,
        db: Database,
        sequence: AccountNumberSequence | None = None,
        max_accounts_per_user: int = DEFAULT_MAX_ACCOUNTS_PER_USER,
    ):
        """Initialize account directory.

        Args:
            db: Database instance
            sequence: Account number sequence (a fresh one starting at 1001 if None)
            max_accounts_per_user: Maximum number of accounts a user may own
        """
        self.db = db
        self.sequence = sequence if sequence is not None else AccountNumberSequence()
        self.max_accounts_per_user = max_accounts_per_user

    def next_account_number(self) -> int:
        """Draw the next account number."""
        return self.sequence.next()

    def enforce_limit(self, user: User) -> bool:
        """Check that the user may open another account.

        Returns:
            True if another account may be opened

        Raises:
            AccountLimitExceededError: If the user already owns the maximum
        """
        owned = self.db.count_accounts(user.username)
        if owned >= self.max_accounts_per_user:
            logger.info(
                "Account limit reached for user %s (%d owned)",
                user.username,
                owned,
                extra=event_fields(username=user.username),
            )
            raise AccountLimitExceededError(account_limit_exceeded(self.max_accounts_per_user))
        return True

    def accounts_for(self, user: User) -> list[Account]:
        """List a user's accounts in creation order."""
        return self.db.list_accounts(user.username)
