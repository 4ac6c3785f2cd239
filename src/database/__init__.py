"""Database connection, session management and stores."""

from .connection import DatabaseManager, get_db, db_manager
from .stores import Store, TaskStore, UserStore

__all__ = ["DatabaseManager", "get_db", "db_manager", "Store", "TaskStore", "UserStore"]
