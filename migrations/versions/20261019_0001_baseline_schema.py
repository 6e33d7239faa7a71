"""baseline schema: companies and invoices

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("code", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("code"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("comp_code", sa.String(length=32), nullable=False),
        sa.Column("amt", sa.Numeric(12, 2), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("add_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("paid_date", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("amt > 0", name="ck_invoices_amt_positive"),
        sa.ForeignKeyConstraint(["comp_code"], ["companies.code"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_invoices_comp_code", "invoices", ["comp_code"])


def downgrade() -> None:
    op.drop_index("idx_invoices_comp_code", table_name="invoices")
    op.drop_table("invoices")
    op.drop_table("companies")
