"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.

A ``Database`` is created once by the process bootstrap and handed to every
repository; nothing in this package keeps a global handle. The underlying
``ThreadedConnectionPool`` is safe to share between request threads.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import extensions, pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from db import array_codec
from errors import StoreError
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """Pooled psycopg2 connections with commit/rollback handled per call."""

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
        pool_factory=pool.ThreadedConnectionPool,
    ):
        """
        Initialize the database connection pool.

        Args:
            dsn: libpq connection string or URL.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.
            pool_factory: Pool class; replaced in tests.

        Raises:
            StoreError: If the database is unreachable.
        """
        try:
            self._pool = pool_factory(min_conn, max_conn, dsn)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise StoreError(f"Failed to connect to database: {e}") from e
        array_codec.register()
        logger.info("Database connection pool initialized successfully.")

    @contextmanager
    def cursor(self) -> Iterator[extensions.cursor]:
        """
        Borrow a connection and yield a cursor on it.

        The transaction is committed when the block exits normally and rolled
        back otherwise. Driver errors are re-raised as StoreError; any other
        exception (e.g. CodecError from a typecaster) propagates unchanged.
        """
        try:
            conn = self._pool.getconn()
        except psycopg2.Error as e:
            raise StoreError(f"Could not get a database connection: {e}") from e
        try:
            with conn.cursor() as cur:
                yield cur
            conn.commit()
        except psycopg2.Error as e:
            self._rollback(conn)
            raise StoreError(str(e).strip() or type(e).__name__) from e
        except BaseException:
            self._rollback(conn)
            raise
        finally:
            self._pool.putconn(conn, close=bool(conn.closed))

    @staticmethod
    def _rollback(conn) -> None:
        if not conn.closed:
            conn.rollback()

    def close(self) -> None:
        """Close all connections in the pool."""
        if not self._pool.closed:
            self._pool.closeall()
            logger.info("Database connection pool closed.")

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
