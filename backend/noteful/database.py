"""
Noteful Backend: Database Session Management
=============================================

What:  Async SQLAlchemy engine, session factory, and the per-request session
       dependency, bundled in a `Database` object.
How:   `create_app()` builds one `Database` at startup and hands it to every
       router factory; handlers receive sessions through
       `Depends(database.session)`.
When:  Engine is created once per app; sessions are created per request.

Connection Pooling:
    Pool sizing comes from settings (see Settings.engine_options). The engine
    owns the pool; `dispose()` closes every pooled connection on shutdown.
"""

from typing import Any, AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from noteful.config import Settings, settings as default_settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`, which tests use to
    create the schema in a throwaway database.
    """
    pass


# Largest id an Integer primary key holds on every supported backend
MAX_ROW_ID = 2**31 - 1


class Database:
    """
    Owns the async engine and session factory for one application instance.

    Attributes:
        engine:          AsyncEngine managing the connection pool
        session_factory: async_sessionmaker producing AsyncSession objects
    """

    def __init__(self, url: str, **engine_kwargs: Any):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        # expire_on_commit=False keeps returned rows readable after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "Database":
        """Build a Database from application settings (pool options included)."""
        config = config or default_settings
        return cls(config.database_url, **config.engine_options())

    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        FastAPI dependency that provides a database session per request.

        How it works:
            1. Creates a new session from the factory
            2. Yields it to the route handler
            3. On success: commits the transaction
            4. On error: rolls back and re-raises for the exception handlers
            5. Always: closes the session (returns the connection to the pool)

        Example usage in a route:
            @router.get("")
            async def list_folders(db: AsyncSession = Depends(database.session)):
                ...
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def ping(self) -> None:
        """Run `SELECT 1`; raises whatever the driver raises when unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close all connections in the pool. Called during app shutdown."""
        await self.engine.dispose()
