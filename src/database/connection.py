"""Database connection and session management."""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Generator
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from config import settings
from models import Base
import logging

logger = logging.getLogger(__name__)


def _sqlite_path(database_url: str) -> str:
    """Extract the file path from a SQLite URL ("" for in-memory databases)."""
    if "sqlite:////" in database_url:
        # Absolute path (four slashes)
        return database_url.replace("sqlite:////", "/")
    path = database_url.replace("sqlite:///", "").replace("sqlite://", "")
    return "" if path == ":memory:" else path


class DatabaseManager:
    def __init__(self, database_url: str = None):
        self.database_url = database_url or settings.database_url
        self.engine = None
        self.SessionLocal = None

    def initialize(self):
        """Initialize database connection and create tables."""
        is_sqlite = self.database_url.startswith("sqlite")

        if is_sqlite:
            db_dir = os.path.dirname(_sqlite_path(self.database_url))
            if db_dir:
                Path(db_dir).mkdir(parents=True, exist_ok=True)

        # Use StaticPool for SQLite to avoid connection issues
        connect_args = {"check_same_thread": False} if is_sqlite else {}
        poolclass = StaticPool if is_sqlite else None

        self.engine = create_engine(
            self.database_url,
            connect_args=connect_args,
            poolclass=poolclass,
            echo=settings.database_echo
        )

        Base.metadata.create_all(bind=self.engine)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

        logger.info(f"Database initialized at {self.database_url}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session that commits on success and rolls back on error."""
        if not self.SessionLocal:
            self.initialize()

        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        """Check that the database answers a trivial query."""
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    def close(self):
        """Close database connection."""
        if self.engine:
            self.engine.dispose()
            logger.info("Database connection closed")


# Global database manager instance
db_manager = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """Dependency for FastAPI to get database session."""
    with db_manager.get_session() as session:
        yield session
