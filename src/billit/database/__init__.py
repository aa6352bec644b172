"""Database layer for billit application."""

from billit.database.base import Database
from billit.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
