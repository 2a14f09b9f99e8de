"""Database handle: engine lifecycle, transactions and error mapping.

A ``Database`` is created once at process start by the composition root
and handed to every repository; ``close()`` disposes of the connection
pool at shutdown.  There is no module-level handle.

Every transaction rolls back on any exception, and SQLAlchemy failures
leave this module only as ``PersistenceError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
)

from storefront.domain.exceptions import PersistenceError
from storefront.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the SQLAlchemy engine and hands out connections."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.engine: Engine = create_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
        )
        if self.engine.dialect.name == "sqlite":
            # Cascades and product references rely on enforced foreign keys
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

    def create_schema(self) -> None:
        """Create any missing tables."""
        with self.transaction("create_schema") as conn:
            metadata.create_all(conn)

    @contextmanager
    def transaction(self, operation: str = "write") -> Iterator[Connection]:
        """Provide a connection inside one transaction.

        Commits when the block exits normally; rolls back if it raises.
        """
        try:
            with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise self._translate(exc, operation) from exc

    @contextmanager
    def connect(self, operation: str = "read") -> Iterator[Connection]:
        """Provide a connection for reads; nothing is committed."""
        try:
            with self.engine.connect() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise self._translate(exc, operation) from exc

    def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            with self.connect("health_check") as conn:
                conn.execute(text("SELECT 1"))
            return True
        except PersistenceError:
            return False

    def close(self) -> None:
        self.engine.dispose()

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _translate(exc: SQLAlchemyError, operation: str) -> PersistenceError:
        if isinstance(exc, IntegrityError):
            message = "Integrity constraint violated"
        elif isinstance(exc, OperationalError):
            message = "Connection or operational error"
        elif isinstance(exc, DBAPIError):
            message = "Database driver error"
        else:
            message = "Database operation failed"

        logger.error(
            f"DB {operation} failed: {message}: {exc}",
            extra={"error_code": PersistenceError.code, "operation": operation},
        )
        return PersistenceError(message, operation=operation)
