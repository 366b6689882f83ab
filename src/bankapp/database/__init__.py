"""Database layer for bankapp application."""

from bankapp.database.base import Database
from bankapp.database.factories import create_memory_database

__all__ = ["Database", "create_memory_database"]
