from typing import Optional
from sqlalchemy import MetaData, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
import logging

from diary_api.exceptions import StorageError
from .settings import Settings

logger = logging.getLogger(__name__)

class Base(DeclarativeBase):
    """Base class for SQLAlchemy models"""
    metadata = MetaData()

class Database:
    """
    Process-wide handle on the document store.

    Built once when the application starts and shared by every request.
    Sessions are handed out per query, never shared between tasks.
    """

    def __init__(self, url: str, echo: bool = False, pool_size: Optional[int] = 5):
        engine_kwargs = {"echo": echo, "pool_pre_ping": True, "pool_recycle": 300}
        if pool_size is not None and not url.startswith("sqlite"):
            engine_kwargs["pool_size"] = pool_size
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.SQLALCHEMY_DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
        )

    async def ping(self) -> None:
        """Raise StorageError unless the store answers a trivial query."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StorageError("Document store is unreachable") from e
        logger.info("Database connection established")

    async def dispose(self) -> None:
        await self.engine.dispose()
