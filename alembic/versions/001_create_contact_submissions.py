"""Create contact submissions table

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates the contact_submissions table. Rows are insert-only.
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# Revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the contact submissions table."""
    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "submitted_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_contact_submissions_submitted_at",
        "contact_submissions",
        ["submitted_at"],
    )


def downgrade() -> None:
    """Drop the contact submissions table."""
    op.drop_index("ix_contact_submissions_submitted_at", table_name="contact_submissions")
    op.drop_table("contact_submissions")
