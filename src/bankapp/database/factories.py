"""Database factory functions for creating database instances."""

from bankapp.database.sqlalchemy_db import SQLAlchemyDatabase

MEMORY_DATABASE_URL = "sqlite://"


def create_memory_database() -> SQLAlchemyDatabase:
    """Create an in-memory SQLite database instance.

    Every instance is independent and its contents disappear with it.

    Returns:
        SQLAlchemyDatabase instance backed by in-memory SQLite
    """
    return SQLAlchemyDatabase(MEMORY_DATABASE_URL)
