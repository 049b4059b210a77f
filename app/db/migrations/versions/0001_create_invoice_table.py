"""Create the invoice table.

Revision ID: 0001_create_invoice_table
Revises: 
Create Date: 2026-10-17
"""
from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_create_invoice_table"
down_revision = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "invoice",
        sa.Column("id", sa.String(length=36), primary_key=True, nullable=False),
        sa.Column("invoice_number", sa.String(length=50), nullable=False),
        sa.Column("event_id", sa.String(length=36), nullable=False),
        sa.Column("event_name", sa.String(length=255), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("user_name", sa.String(length=255), nullable=False),
        sa.Column("amount", sa.Numeric(18, 2), nullable=False),
        sa.Column("issue_date", sa.Date(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("status", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.CheckConstraint("amount > 0", name="ck_invoice_amount_positive"),
    )

    op.create_index("ix_invoice_invoice_number", "invoice", ["invoice_number"], unique=True)
    op.create_index("ix_invoice_event_id", "invoice", ["event_id"])
    op.create_index("ix_invoice_user_id", "invoice", ["user_id"])
    op.create_index("ix_invoice_status_due_date", "invoice", ["status", "due_date"])


def downgrade() -> None:
    op.drop_index("ix_invoice_status_due_date", table_name="invoice")
    op.drop_index("ix_invoice_user_id", table_name="invoice")
    op.drop_index("ix_invoice_event_id", table_name="invoice")
    op.drop_index("ix_invoice_invoice_number", table_name="invoice")

    op.drop_table("invoice")
