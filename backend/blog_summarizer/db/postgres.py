"""PostgreSQL engine and session management for summary records."""

from functools import lru_cache

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from blog_summarizer.config import get_settings
from blog_summarizer.exceptions import PersistenceFailure
from blog_summarizer.models import BlogSummary


@lru_cache
def get_engine() -> AsyncEngine:
    """Create the async engine on first use; there is no default database."""
    settings = get_settings()
    if not settings.database_url:
        raise PersistenceFailure("DATABASE_URL is not configured")
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        future=True,
    )


@lru_cache
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db() -> None:
    """Initialize database tables."""
    async with get_engine().begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def insert_summary(
    blog_url: str,
    title: str,
    summary_english: str,
    summary_urdu: str,
) -> BlogSummary:
    """Insert a new summary row and return it with its generated id."""
    record = BlogSummary(
        blog_url=blog_url,
        title=title,
        summary_english=summary_english,
        summary_urdu=summary_urdu,
    )
    try:
        async with get_sessionmaker()() as session:
            session.add(record)
            await session.commit()
            await session.refresh(record)
    except SQLAlchemyError as e:
        raise PersistenceFailure(f"Failed to insert summary for {blog_url}: {e}") from e
    return record
