"""Engine and session factory for the PostgreSQL store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from masacarri.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Args:
        database: Connection URL and pool sizing
        echo: Emit every SQL statement to the ``sqlalchemy.engine`` logger
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory shared by requests and background work.

    Rows are mapped to frozen domain models right after each query, so
    sessions never need to refresh state after a commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
