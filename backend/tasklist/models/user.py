"""User ORM: persists credentials for the Credential Store.

Invariants:
    - username is unique (the unique constraint is what surfaces DuplicateUsername)
    - password_hash only; the plaintext column does not exist
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tasklist.db.base import Base


class User(Base):
    """Registered account."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    lists: Mapped[list["TodoList"]] = relationship(
        "TodoList", back_populates="owner", cascade="all, delete-orphan",
    )
