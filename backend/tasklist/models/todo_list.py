"""TodoList ORM: a titled list owned by exactly one user.

Invariants:
    - owner_id is non-nullable and never reassigned
    - Deleting a list deletes its items (ORM cascade + ON DELETE CASCADE)
"""

from sqlalchemy import String, Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tasklist.db.base import Base


class TodoList(Base):
    """List aggregate root: owns its items."""
    __tablename__ = "todo_lists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    owner: Mapped["User"] = relationship("User", back_populates="lists")
    items: Mapped[list["TodoItem"]] = relationship(
        "TodoItem", back_populates="todo_list", cascade="all, delete-orphan",
    )
