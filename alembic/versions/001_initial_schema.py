"""Initial schema — agents and tickets.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Agents (directory is maintained by user management; columns are nullable
    # so partially filled records can be loaded and skipped)
    op.create_table(
        "agents",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("role", sa.String(20), nullable=True),
        sa.Column("status", sa.String(20), nullable=True),
        sa.Column("auto_assign", sa.Boolean, nullable=True),
        sa.Column("specialization", sa.String(30), nullable=True),
        sa.Column("max_tickets", sa.Integer, nullable=True),
        sa.Column("work_start", sa.Time, nullable=True),
        sa.Column("work_end", sa.Time, nullable=True),
        sa.Column("timezone", sa.String(64), nullable=True),
        sa.Column("work_days", ARRAY(sa.String(3)), nullable=True),
    )
    op.create_index("idx_agents_role_status", "agents", ["role", "status"])

    # Tickets
    op.create_table(
        "tickets",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(300), nullable=False, server_default=""),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(20), nullable=False, server_default="open"),
        sa.Column("assigned_to", sa.String(64), nullable=True),
        sa.Column("assigned_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("version", sa.Integer, nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("idx_tickets_status", "tickets", ["status"])
    op.create_index("idx_tickets_assigned_to", "tickets", ["assigned_to"])


def downgrade() -> None:
    op.drop_index("idx_tickets_assigned_to", table_name="tickets")
    op.drop_index("idx_tickets_status", table_name="tickets")
    op.drop_table("tickets")
    op.drop_index("idx_agents_role_status", table_name="agents")
    op.drop_table("agents")
