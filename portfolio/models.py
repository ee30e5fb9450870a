"""
Portfolio Database Models
SQLAlchemy ORM models for persisted contact submissions.
"""
import uuid
from datetime import datetime

from sqlalchemy import TIMESTAMP, Text, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class ContactSubmission(Base):
    """
    Contact form submissions.

    Rows are written once per valid submission and never updated or
    deleted by the application.
    """

    __tablename__ = "contact_submissions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        doc="Unique identifier for the submission",
    )
    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Submitter's name",
    )
    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Submitter's email address",
    )
    message: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Message body",
    )
    submitted_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
        doc="When the submission was received",
    )

    def __repr__(self) -> str:
        return f"<ContactSubmission(id={self.id}, email={self.email})>"
