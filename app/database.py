"""PostgreSQL async database connection and session management."""

import asyncio
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from .config import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.database_url,
    echo=settings.sql_echo,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_timeout=15,
    pool_pre_ping=True,
    pool_recycle=3600,
)

# Objects stay usable after commit; reference-set collections are read back
# in responses once the unit of work has been committed.
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """Declarative base for ORM models."""
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Async dependency injection for FastAPI.

    Services commit their own unit of work; anything left pending when the
    request fails is rolled back here.

    Usage:
        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Item))
            return result.scalars().all()
    """
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def warmup_connection_pool(pool_size: Optional[int] = None) -> int:
    """
    Open pooled connections at startup so early requests skip the handshake.

    Failures are logged and skipped; the service still starts without them.

    Returns:
        Number of connections that answered.
    """
    target_size = pool_size or settings.db_pool_size

    async def ping() -> bool:
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Pool warmup connection failed: {e}")
            return False

    results = await asyncio.gather(*(ping() for _ in range(target_size)))
    return sum(results)
