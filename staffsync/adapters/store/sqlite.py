"""SQLite database adapter.

Implements DatabasePort using SQLite with aiosqlite for async access.
Zero operational overhead: the whole store is a single file.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any

import aiosqlite

from staffsync.core.models import Company, User
from staffsync.core.ports import DatabasePort

logger = logging.getLogger(__name__)


class SQLiteDatabase(DatabasePort):
    """SQLite-backed user and company store with connection pooling."""

    def __init__(self, db_path: str, pool_size: int = 5):
        """Initialize SQLite store with connection pooling.

        Args:
            db_path: Path to SQLite database file.
            pool_size: Number of connections to maintain in the pool.
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._pool: list[aiosqlite.Connection] = []
        self._pool_lock = asyncio.Lock()
        self._schema_lock = asyncio.Lock()
        self._pool_size = pool_size
        self._schema_initialized = False

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get a connection from the pool or create a new one."""
        async with self._pool_lock:
            if self._pool:
                return self._pool.pop()
        return await aiosqlite.connect(str(self.db_path))

    async def _return_connection(self, conn: aiosqlite.Connection) -> None:
        """Return a connection to the pool."""
        async with self._pool_lock:
            if len(self._pool) < self._pool_size:
                self._pool.append(conn)
                return
        await conn.close()

    async def close_pool(self) -> None:
        """Close all pooled connections."""
        async with self._pool_lock:
            for conn in self._pool:
                await conn.close()
            self._pool.clear()

    async def _init_schema(self) -> None:
        """Initialize database schema on first use.

        Only runs once per instance. Subsequent calls are no-ops.
        """
        if self._schema_initialized:
            return

        async with self._schema_lock:
            if self._schema_initialized:
                return

            conn = await self._get_connection()
            try:
                await conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS users (
                        user_id INTEGER PRIMARY KEY AUTOINCREMENT,
                        email TEXT NOT NULL,
                        type INTEGER NOT NULL,
                        is_email_confirmed INTEGER NOT NULL DEFAULT 0
                    )
                    """
                )
                await conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS companies (
                        domain_name TEXT PRIMARY KEY,
                        number_of_employees INTEGER NOT NULL
                    )
                    """
                )
                await conn.commit()
                self._schema_initialized = True
            finally:
                await self._return_connection(conn)

    async def get_user_by_id(self, user_id: int) -> tuple[Any, ...]:
        """Look up the raw row for a user."""
        await self._init_schema()

        conn = await self._get_connection()
        try:
            cursor = await conn.execute(
                """
                SELECT user_id, email, type, is_email_confirmed
                FROM users WHERE user_id = ?
                """,
                (user_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                raise LookupError(f"User {user_id} not found")
            return self._row_to_user_data(row)
        finally:
            await self._return_connection(conn)

    async def save_user(self, user: User) -> None:
        """Insert a new user or update an existing one."""
        await self._init_schema()

        conn = await self._get_connection()
        try:
            if user.user_id == 0:
                cursor = await conn.execute(
                    """
                    INSERT INTO users (email, type, is_email_confirmed)
                    VALUES (?, ?, ?)
                    """,
                    (user.email, user.type.value, int(user.is_email_confirmed)),
                )
                await conn.commit()
                user.user_id = cursor.lastrowid
                logger.debug(f"Inserted user {user.user_id}")
            else:
                await conn.execute(
                    """
                    UPDATE users
                    SET email = ?, type = ?, is_email_confirmed = ?
                    WHERE user_id = ?
                    """,
                    (
                        user.email,
                        user.type.value,
                        int(user.is_email_confirmed),
                        user.user_id,
                    ),
                )
                await conn.commit()
        except aiosqlite.Error as e:
            logger.error(f"Failed to save user {user.user_id}: {e}", extra={"user_id": user.user_id})
            raise
        finally:
            await self._return_connection(conn)

    async def get_company(self) -> tuple[Any, ...]:
        """Look up the raw row for the company."""
        await self._init_schema()

        conn = await self._get_connection()
        try:
            cursor = await conn.execute(
                """
                SELECT domain_name, number_of_employees
                FROM companies ORDER BY rowid LIMIT 1
                """
            )
            row = await cursor.fetchone()
            if row is None:
                raise LookupError("No company stored")
            return self._row_to_company_data(row)
        finally:
            await self._return_connection(conn)

    async def save_company(self, company: Company) -> None:
        """Store the company as the single companies row.

        Rows for any other domain are removed in the same transaction.
        """
        await self._init_schema()

        conn = await self._get_connection()
        try:
            await conn.execute(
                "DELETE FROM companies WHERE domain_name != ?",
                (company.domain_name,),
            )
            cursor = await conn.execute(
                """
                UPDATE companies SET number_of_employees = ?
                WHERE domain_name = ?
                """,
                (company.number_of_employees, company.domain_name),
            )
            if cursor.rowcount == 0:
                await conn.execute(
                    """
                    INSERT INTO companies (domain_name, number_of_employees)
                    VALUES (?, ?)
                    """,
                    (company.domain_name, company.number_of_employees),
                )
            await conn.commit()
        except aiosqlite.Error as e:
            await conn.rollback()
            logger.error(
                f"Failed to save company {company.domain_name}: {e}",
                extra={"domain_name": company.domain_name},
            )
            raise
        finally:
            await self._return_connection(conn)

    @staticmethod
    def _row_to_user_data(row: tuple[Any, ...]) -> tuple[Any, ...]:
        """Convert a users row to the raw user tuple.

        Raises:
            ValueError: If row is malformed.
        """
        if len(row) != 4:
            raise ValueError(f"Invalid user row length: expected 4, got {len(row)}")
        user_id, email, type_code, is_email_confirmed = row
        return (user_id, email, type_code, bool(is_email_confirmed))

    @staticmethod
    def _row_to_company_data(row: tuple[Any, ...]) -> tuple[Any, ...]:
        """Convert a companies row to the raw company tuple.

        Raises:
            ValueError: If row is malformed.
        """
        if len(row) != 2:
            raise ValueError(f"Invalid company row length: expected 2, got {len(row)}")
        return tuple(row)
