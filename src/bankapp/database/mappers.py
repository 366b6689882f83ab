"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so domain entities never carry
ORM state out of the database layer.
"""

from bankapp.domain import entities as domain
from bankapp.database.models import (
    User as ORMUser,
    Account as ORMAccount,
    Transaction as ORMTransaction,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        username=orm_user.username,
        password=orm_user.password,
        created_at=orm_user.created_at,
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        number=orm_account.number,
        owner=orm_account.owner.username,
        holder_name=orm_account.holder_name,
        account_type=domain.AccountType(orm_account.account_type),
        balance=orm_account.balance,
        opened_at=orm_account.opened_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.unique_id,
        account_number=orm_transaction.account_number,
        kind=domain.TransactionKind(orm_transaction.kind),
        amount=orm_transaction.amount,
        timestamp=orm_transaction.timestamp,
    )
