"""ORM Models: SQLAlchemy declarative models for users, lists and items.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns TodoLists; TodoList owns TodoItems; deletes cascade downward

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from tasklist.models.user import User  # noqa: F401
from tasklist.models.todo_list import TodoList  # noqa: F401
from tasklist.models.todo_item import TodoItem  # noqa: F401
