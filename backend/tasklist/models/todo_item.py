"""TodoItem ORM: an entry in a TodoList.

Invariants:
    - list_id references an existing todo_lists row
    - No owner column: ownership is read through the parent list
"""

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tasklist.db.base import Base


class TodoItem(Base):
    """Item belonging to exactly one list."""
    __tablename__ = "todo_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    list_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("todo_lists.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    todo_list: Mapped["TodoList"] = relationship("TodoList", back_populates="items")
