"""create task table

Revision ID: 5c1e7a2f9b34
Revises: 
Create Date: 2026-10-19 10:02:11.418220

"""
from alembic import op
import sqlalchemy as sa


revision = '5c1e7a2f9b34'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "task",
        sa.Column("task_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("task_id"),
    )
    op.create_index("ix_task_status", "task", ["status"])
    op.create_index("ix_task_created_at", "task", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_task_created_at", table_name="task")
    op.drop_index("ix_task_status", table_name="task")
    op.drop_table("task")
