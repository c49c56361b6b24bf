"""
Database configuration and session management.
"""

import logging
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("dailydiet.database")

# Create SQLAlchemy Base
Base = declarative_base()


class Database:
    """
    Store handle with an explicit lifecycle.

    Opened once at process start (see the lifespan in main.py), handed to
    request handlers through ``api.dependencies.get_db`` and closed at
    shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "Database":
        """Create the engine and session factory"""
        if self.is_open:
            return self

        kwargs = {"echo": self.echo, "future": True}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            # In-memory SQLite lives inside one connection; share it
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool

        self._engine = create_engine(self.url, **kwargs)
        self._session_factory = sessionmaker(
            bind=self._engine, autoflush=False, future=True
        )
        logger.info(f"database_opened dialect={self._engine.dialect.name}")
        return self

    def init_schema(self) -> None:
        """Initialize database schema"""
        # Import models so they register on Base.metadata
        from domain.models import user, meal  # noqa: F401

        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def ping(self) -> bool:
        """Run a trivial query against the store"""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database is not open")
        return self._session_factory()

    def session_scope(self) -> Generator[Session, None, None]:
        """Yield a session and ensure it's closed after use"""
        db = self.session()
        try:
            yield db
        finally:
            db.close()

    def close(self) -> None:
        """Dispose the engine and drop pooled connections"""
        if not self.is_open:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("database_closed")
