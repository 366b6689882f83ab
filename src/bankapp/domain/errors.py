"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only care about bad input.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations or exhausted limits."""


class AuthenticationError(DomainError):
    """Missing or rejected user identity."""


class OperationError(DomainError):
    """Operation is not allowed in the account's current state."""


class DuplicateUsernameError(ConflictError):
    """A user with the same username is already registered."""


class InvalidCredentialsError(AuthenticationError):
    """No user matches the supplied username and password."""


class NotAuthenticatedError(AuthenticationError):
    """Operation requires a logged-in user."""


class AccountLimitExceededError(ConflictError):
    """User already owns the maximum number of accounts."""


class InvalidAccountTypeError(ValidationError):
    """Account type is neither savings nor checking."""


class InvalidAmountError(ValidationError):
    """Amount or rate is outside the accepted range."""


class InsufficientFundsError(OperationError):
    """Withdrawal exceeds the current balance."""


class InvalidOperationError(OperationError):
    """Operation is not supported for this kind of account."""


class NoAccountsFoundError(NotFoundError):
    """User does not own any accounts."""


class AccountNotFoundError(NotFoundError):
    """No owned account matches the requested number."""


def duplicate_username(username: str) -> str:
    """Return message for an already registered username."""
    return f"User '{username}' already exists. Please log in or choose another username"


def invalid_credentials() -> str:
    """Return message for a failed login."""
    return "Invalid credentials"


def not_authenticated() -> str:
    """Return message for operations attempted without a session user."""
    return "You must be logged in to do that"


def account_limit_exceeded(limit: int) -> str:
    """Return message when a user already owns the maximum number of accounts."""
    return f"Only {limit} account{'s' if limit != 1 else ''} per user are allowed"


def invalid_account_type(value: str) -> str:
    """Return message for an unknown account type."""
    return f"Invalid account type '{value}'. Please enter 'savings' or 'checking'"


def invalid_amount(amount: object, what: str = "Amount") -> str:
    """Return message for a rejected amount."""
    return f"{what} must be greater than zero, got {amount}"


def insufficient_funds(balance: Decimal, amount: Decimal) -> str:
    """Return message for a withdrawal larger than the balance."""
    return f"Insufficient funds: balance is {balance}, requested {amount}"


def interest_not_supported(account_number: int) -> str:
    """Return message for interest requested on a non-savings account."""
    return (
        f"Interest can only be calculated for savings accounts "
        f"(account {account_number} is not a savings account)"
    )


def no_accounts_found() -> str:
    """Return message for a user without accounts."""
    return "No accounts found"


def account_not_found(account_number: object) -> str:
    """Return message for missing account."""
    return f"Account {account_number} not found"


def negative_amount(amount: object, what: str = "Amount") -> str:
    """Return message for a rejected negative amount."""
    return f"{what} must not be negative, got {amount}"


def not_a_number(value: object, what: str = "Amount") -> str:
    """Return message for a value that is not a finite number."""
    return f"{what} must be a finite number, got {value!r}"
