"""Database layer for classfund application."""

from classfund.database.base import Database
from classfund.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
