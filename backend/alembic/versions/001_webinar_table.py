"""Webinar table with seat range constraint.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Webinar",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.Column("startDate", sa.DateTime(timezone=True), nullable=False),
        sa.Column("endDate", sa.DateTime(timezone=True), nullable=False),
        sa.Column("organizerId", sa.String(255), nullable=False),
        sa.CheckConstraint("seats > 0 AND seats <= 1000", name="check_webinar_seats_range"),
    )
    op.create_index("ix_Webinar_organizerId", "Webinar", ["organizerId"])


def downgrade() -> None:
    op.drop_index("ix_Webinar_organizerId", table_name="Webinar")
    op.drop_table("Webinar")
