"""Domain Entities: storage-agnostic records passed across the repository boundary.

Invariants:
    - User never carries a plaintext password, only password_hash
    - TodoList.owner_id is set once at creation and never changes
    - TodoItem has no owner field; its owner is the parent list's owner
    - Patch fields left as None are untouched by an update
"""

from dataclasses import dataclass, fields

from tasklist.core.domain_types import UserId, ListId, ItemId


@dataclass
class User:
    username: str
    password_hash: str
    name: str = ""
    id: UserId | None = None


@dataclass
class TodoList:
    title: str
    description: str = ""
    owner_id: UserId | None = None
    id: ListId | None = None


@dataclass
class TodoItem:
    title: str
    description: str = ""
    done: bool = False
    list_id: ListId | None = None
    id: ItemId | None = None


@dataclass
class ListPatch:
    """Partial update for a TodoList."""
    title: str | None = None
    description: str | None = None

    def changes(self) -> dict:
        return _set_fields(self)


@dataclass
class ItemPatch:
    """Partial update for a TodoItem."""
    title: str | None = None
    description: str | None = None
    done: bool | None = None

    def changes(self) -> dict:
        return _set_fields(self)


@dataclass
class OwnedItem:
    """An item together with the owner of its parent list."""
    item: TodoItem
    owner_id: UserId


def _set_fields(patch) -> dict:
    return {
        f.name: getattr(patch, f.name)
        for f in fields(patch)
        if getattr(patch, f.name) is not None
    }
