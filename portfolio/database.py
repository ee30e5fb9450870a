"""
Portfolio Database Connection Setup
Provides the async engine, session factory and the submission store.
"""

from typing import Any

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from portfolio.core.exceptions import StoreError
from portfolio.models import Base
from portfolio.models import ContactSubmission as ContactSubmissionRecord
from portfolio.schemas.contact import ContactSubmission

logger = structlog.get_logger(__name__)

# =============================================================================
# Async Engine and Session
# =============================================================================


def build_async_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the process-wide async engine.

    Pool options only apply to server databases; SQLite URLs (used in
    tests) get the driver defaults.
    """
    options: dict[str, Any] = {"echo": echo}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return create_async_engine(database_url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


# =============================================================================
# Submission Store
# =============================================================================


class SqlSubmissionStore:
    """
    Document store for contact submissions backed by SQLAlchemy.

    One row per save; there is no update or delete path.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def save(self, submission: ContactSubmission) -> None:
        """
        Persist a submission.

        Raises:
            StoreError: If the insert or commit fails.
        """
        record = ContactSubmissionRecord(
            name=submission.name,
            email=submission.email,
            message=submission.message,
            submitted_at=submission.submitted_at,
        )
        async with self._session_factory() as session:
            try:
                session.add(record)
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error("submission_save_failed", email=submission.email, error=str(e))
                raise StoreError("Failed to persist contact submission") from e

        logger.info("submission_saved", submission_id=str(record.id), email=submission.email)

    async def ping(self) -> dict[str, Any]:
        """
        Check database connectivity for health checks.

        Returns:
            dict with connection status and details
        """
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
                return {
                    "status": "healthy",
                    "database": "connected",
                }
        except Exception as e:
            logger.warning("database_ping_failed", error=str(e))
            return {
                "status": "unhealthy",
                "database": "disconnected",
            }


# =============================================================================
# Database Initialization
# =============================================================================


async def init_db(engine: AsyncEngine) -> None:
    """
    Initialize the database by creating all tables.

    Note: In production, use Alembic migrations instead.
    This is primarily for development and testing.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db(engine: AsyncEngine) -> None:
    """
    Close all database connections.

    Call this during application shutdown.
    """
    await engine.dispose()
