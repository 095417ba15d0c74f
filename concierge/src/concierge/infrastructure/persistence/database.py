"""
Database connection and session management.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from concierge.domain.exceptions import DatabaseConnectionError
from concierge.domain.services import IDatabase
from concierge.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class Database(IDatabase):
    """
    Async database connection manager using SQLAlchemy.

    Created closed; open_with_config() builds the engine from settings and
    verifies connectivity. A failed open leaves the engine in place, so
    the handle exists but every query against it fails.
    """

    def __init__(
        self,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
    ):
        """
        Store pool parameters; the URL arrives with open_with_config().

        Args:
            echo: Log emitted SQL
            pool_size: Persistent pool connections
            max_overflow: Max connections beyond pool_size
            pool_timeout: Seconds to wait for a free connection
            pool_recycle: Connection lifetime in seconds
        """
        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.database_url: str | None = None
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker | None = None

    @classmethod
    def from_settings(cls, settings) -> "Database":
        """Build a closed database handle using pool settings."""
        return cls(
            echo=settings.DATABASE_ECHO,
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
        )

    @property
    def is_open(self) -> bool:
        """Check if an engine has been created."""
        return self._engine is not None

    async def open_with_config(self, settings) -> None:
        """
        Create the engine for settings.DATABASE_URL and ping it.

        Args:
            settings: Application settings

        Raises:
            DatabaseConnectionError: If the engine cannot be created or
                the database does not answer
        """
        if self._engine is not None:
            return

        self.database_url = settings.DATABASE_URL

        connect_args = {}
        if self.database_url.startswith("postgresql+asyncpg"):
            connect_args["server_settings"] = {
                "application_name": settings.APP_NAME.lower(),
            }

        try:
            self._engine = create_async_engine(
                self.database_url,
                echo=self.echo,
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_timeout=self.pool_timeout,
                pool_recycle=self.pool_recycle,
                pool_pre_ping=True,
                connect_args=connect_args,
            )
            self._session_factory = async_sessionmaker(
                self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )

            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            raise DatabaseConnectionError(str(e)) from e

        logger.info("Database connection established")

    async def close(self) -> None:
        """Dispose of the engine and its pool (safe to call twice)."""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connection closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Transactional session scope: commit on exit, roll back on error.

        Raises:
            RuntimeError: If open_with_config() has not run
        """
        if self._session_factory is None:
            raise RuntimeError("Database not open. Call open_with_config() first.")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        """Run SELECT 1; False when closed or unreachable."""
        if self._engine is None:
            return False

        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError):
            return False
