"""PostgreSQL database adapter.

Implements DatabasePort using PostgreSQL with asyncpg for async access.
"""

import asyncio
import logging
from typing import Any

import asyncpg

from staffsync.core.models import Company, User
from staffsync.core.ports import DatabasePort

logger = logging.getLogger(__name__)


class PostgreSQLDatabase(DatabasePort):
    """PostgreSQL-backed user and company store with connection pooling."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 5432,
        database: str = "staffsync",
        user: str = "staffsync",
        password: str = "",
        pool_size: int = 10,
    ):
        """Initialize PostgreSQL store with connection pooling.

        Args:
            host: PostgreSQL server hostname.
            port: PostgreSQL server port.
            database: Database name.
            user: Database user.
            password: Database password.
            pool_size: Number of connections to maintain in the pool.
        """
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self._pool: asyncpg.Pool | None = None
        self._pool_size = pool_size
        self._schema_lock = asyncio.Lock()
        self._schema_initialized = False

    async def _init_pool(self) -> None:
        """Initialize the connection pool on first use."""
        if self._pool is not None:
            return

        self._pool = await asyncpg.create_pool(
            host=self.host,
            port=self.port,
            database=self.database,
            user=self.user,
            password=self.password,
            min_size=1,
            max_size=self._pool_size,
        )

    async def close_pool(self) -> None:
        """Close all pooled connections."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None

    async def _init_schema(self) -> None:
        """Initialize database schema on first use.

        Only runs once per instance. Subsequent calls are no-ops.
        """
        if self._schema_initialized:
            return

        async with self._schema_lock:
            if self._schema_initialized:
                return

            await self._init_pool()
            assert self._pool is not None

            async with self._pool.acquire() as conn:
                await conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS users (
                        user_id SERIAL PRIMARY KEY,
                        email TEXT NOT NULL,
                        type INTEGER NOT NULL,
                        is_email_confirmed BOOLEAN NOT NULL DEFAULT FALSE
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

                self._schema_initialized = True

    async def _acquire_pool(self) -> asyncpg.Pool:
        await self._init_schema()
        await self._init_pool()
        assert self._pool is not None
        return self._pool

    async def get_user_by_id(self, user_id: int) -> tuple[Any, ...]:
        """Look up the raw row for a user."""
        pool = await self._acquire_pool()

        async with pool.acquire() as conn:
            row = await conn.fetchrow(
                """
                SELECT user_id, email, type, is_email_confirmed
                FROM users WHERE user_id = $1
                """,
                user_id,
            )
            if row is None:
                raise LookupError(f"User {user_id} not found")
            return (
                row["user_id"],
                row["email"],
                row["type"],
                row["is_email_confirmed"],
            )

    async def save_user(self, user: User) -> None:
        """Insert a new user or update an existing one."""
        pool = await self._acquire_pool()

        async with pool.acquire() as conn:
            if user.user_id == 0:
                user.user_id = await conn.fetchval(
                    """
                    INSERT INTO users (email, type, is_email_confirmed)
                    VALUES ($1, $2, $3)
                    RETURNING user_id
                    """,
                    user.email,
                    user.type.value,
                    user.is_email_confirmed,
                )
                logger.debug(f"Inserted user {user.user_id}")
            else:
                await conn.execute(
                    """
                    UPDATE users
                    SET email = $1, type = $2, is_email_confirmed = $3
                    WHERE user_id = $4
                    """,
                    user.email,
                    user.type.value,
                    user.is_email_confirmed,
                    user.user_id,
                )

    async def get_company(self) -> tuple[Any, ...]:
        """Look up the raw row for the company."""
        pool = await self._acquire_pool()

        async with pool.acquire() as conn:
            row = await conn.fetchrow(
                """
                SELECT domain_name, number_of_employees
                FROM companies LIMIT 1
                """
            )
            if row is None:
                raise LookupError("No company stored")
            return (row["domain_name"], row["number_of_employees"])

    async def save_company(self, company: Company) -> None:
        """Store the company as the single companies row.

        Rows for any other domain are removed in the same transaction.
        """
        pool = await self._acquire_pool()

        async with pool.acquire() as conn:
            try:
                async with conn.transaction():
                    await conn.execute(
                        "DELETE FROM companies WHERE domain_name <> $1",
                        company.domain_name,
                    )
                    await conn.execute(
                        """
                        INSERT INTO companies (domain_name, number_of_employees)
                        VALUES ($1, $2)
                        ON CONFLICT (domain_name) DO UPDATE SET
                            number_of_employees = $2
                        """,
                        company.domain_name,
                        company.number_of_employees,
                    )
            except asyncpg.PostgresError as e:
                logger.error(
                    f"Failed to save company {company.domain_name}: {e}",
                    extra={"domain_name": company.domain_name},
                )
                raise
