"""SQLAlchemy models for bankapp database."""

from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Enum,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from bankapp.domain.entities import AccountType, TransactionKind

Base = declarative_base()


class DecimalText(TypeDecorator):
    """Store Decimal values as text so no precision is lost.

    SQLite has no native decimal type and Numeric round-trips through float.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Optional[Decimal], dialect) -> Optional[str]:
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value: Optional[str], dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return Decimal(value)


class UTCDateTime(TypeDecorator):
    """Store datetimes as naive UTC and read them back as aware UTC.

    Naive values passed in are taken to be UTC already.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return value.replace(tzinfo=UTC)


class User(Base):
    """Registered user model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)
    created_at = Column(UTCDateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    accounts = relationship("Account", back_populates="owner", order_by="Account.number")


class Account(Base):
    """Bank account model."""

    __tablename__ = "accounts"

    number = Column(Integer, primary_key=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    holder_name = Column(String, nullable=False)
    account_type = Column(Enum(AccountType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    balance = Column(DecimalText, nullable=False, default=Decimal("0"))
    opened_at = Column(UTCDateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="accounts")
    transactions = relationship("Transaction", back_populates="account", order_by="Transaction.id")


class Transaction(Base):
    """Ledger entry model.

    Rows are only ever inserted; ``id`` preserves append order.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    unique_id = Column(String, unique=True, nullable=False)
    account_number = Column(Integer, ForeignKey("accounts.number"), nullable=False)
    kind = Column(Enum(TransactionKind, values_callable=lambda e: [m.value for m in e]), nullable=False)
    amount = Column(DecimalText, nullable=False)
    timestamp = Column(UTCDateTime, nullable=False)

    # Relationships
    account = relationship("Account", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    In-memory SQLite URLs share a single connection, otherwise every new
    connection would see an empty database.
    """
    engine_kwargs = {}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs = {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    engine = create_engine(database_url, echo=False, **engine_kwargs)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
