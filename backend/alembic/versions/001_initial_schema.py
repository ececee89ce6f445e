"""Initial schema: users, todo_lists, todo_items.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Lists cascade from their owner and items cascade from their list
(ON DELETE CASCADE), so deleting a list removes its items.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("username", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True),
            nullable=False, server_default=sa.func.now(),
        ),
    )
    op.create_table(
        "todo_lists",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "owner_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
    )
    op.create_index("ix_todo_lists_owner_id", "todo_lists", ["owner_id"])
    op.create_table(
        "todo_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "list_id", sa.Integer,
            sa.ForeignKey("todo_lists.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("done", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_todo_items_list_id", "todo_items", ["list_id"])


def downgrade() -> None:
    op.drop_index("ix_todo_items_list_id", table_name="todo_items")
    op.drop_table("todo_items")
    op.drop_index("ix_todo_lists_owner_id", table_name="todo_lists")
    op.drop_table("todo_lists")
    op.drop_table("users")
