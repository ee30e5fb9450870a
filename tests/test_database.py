"""
Tests for the SQLAlchemy submission store.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from portfolio.core.exceptions import StoreError
from portfolio.database import SqlSubmissionStore
from portfolio.models import ContactSubmission as ContactSubmissionRecord
from portfolio.schemas.contact import ContactSubmission


class TestSqlSubmissionStore:
    """Tests for SqlSubmissionStore."""

    @pytest.mark.asyncio
    async def test_save_persists_record(self, sql_store, session_factory, sample_contact_data):
        submitted_at = datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc)
        submission = ContactSubmission(**sample_contact_data, submitted_at=submitted_at)

        await sql_store.save(submission)

        async with session_factory() as session:
            records = (await session.scalars(select(ContactSubmissionRecord))).all()

        assert len(records) == 1
        record = records[0]
        assert record.id is not None
        assert record.name == sample_contact_data["name"]
        assert record.email == sample_contact_data["email"]
        assert record.message == sample_contact_data["message"]
        assert record.submitted_at.replace(tzinfo=None) == submitted_at.replace(tzinfo=None)

    @pytest.mark.asyncio
    async def test_each_save_inserts(self, sql_store, session_factory, sample_contact_data):
        """Test identical submissions are stored independently."""
        await sql_store.save(ContactSubmission(**sample_contact_data))
        await sql_store.save(ContactSubmission(**sample_contact_data))

        async with session_factory() as session:
            records = (await session.scalars(select(ContactSubmissionRecord))).all()

        assert len(records) == 2
        assert records[0].id != records[1].id

    @pytest.mark.asyncio
    async def test_commit_failure_raises_store_error(self, sample_contact_data):
        session = MagicMock()
        session.commit = AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("db down")))
        session.rollback = AsyncMock()
        session.__aenter__ = AsyncMock(return_value=session)
        session.__aexit__ = AsyncMock(return_value=False)
        store = SqlSubmissionStore(MagicMock(return_value=session))

        with pytest.raises(StoreError):
            await store.save(ContactSubmission(**sample_contact_data))

        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_ping_healthy(self, sql_store):
        assert (await sql_store.ping())["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_ping_unhealthy(self):
        session = MagicMock()
        session.__aenter__ = AsyncMock(side_effect=OSError("connection refused"))
        session.__aexit__ = AsyncMock(return_value=False)
        store = SqlSubmissionStore(MagicMock(return_value=session))

        result = await store.ping()

        assert result == {"status": "unhealthy", "database": "disconnected"}
