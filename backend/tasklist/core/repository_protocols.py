"""Boundary Protocols: contracts between the ownership core and the Storage Backend.

Invariants:
    - Core NEVER imports from infrastructure: dependency arrows point inward only
    - Repositories perform no ownership checks; services do
    - Lookups return None for missing rows; services turn that into ResourceNotFoundError
    - Any backend failure surfaces as StorageError
    - ListRepository.delete removes the list's items as well

Design Decisions:
    - Protocol over ABC: structural subtyping, one implementation per storage technology
      selected by constructor injection
"""

from typing import Protocol

from tasklist.core.domain_types import UserId, ListId, ItemId
from tasklist.core.entities import (
    User, TodoList, TodoItem, ListPatch, ItemPatch, OwnedItem,
)


class UserRepository(Protocol):
    """Credential Store. create() raises DuplicateUsernameError on conflict."""
    async def create(self, user: User) -> UserId: ...
    async def find_by_username(self, username: str) -> User | None: ...


class ListRepository(Protocol):
    """TodoList persistence."""
    async def create(self, owner_id: UserId, todo_list: TodoList) -> ListId: ...
    async def list_by_owner(self, owner_id: UserId) -> list[TodoList]: ...
    async def get(self, list_id: ListId) -> TodoList | None: ...
    async def update(self, list_id: ListId, patch: ListPatch) -> None: ...
    async def delete(self, list_id: ListId) -> None: ...


class ItemRepository(Protocol):
    """TodoItem persistence, scoped by parent list."""
    async def create(self, list_id: ListId, item: TodoItem) -> ItemId: ...
    async def list_by_list(self, list_id: ListId) -> list[TodoItem]: ...
    async def get_with_owner(self, item_id: ItemId) -> OwnedItem | None: ...
    async def update(self, item_id: ItemId, patch: ItemPatch) -> None: ...
    async def delete(self, item_id: ItemId) -> None: ...
