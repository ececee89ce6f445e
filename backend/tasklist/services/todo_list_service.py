"""TodoList Service: owner-only access to lists.

Invariants:
    - Every operation on an existing list proves list.owner_id == user_id first
    - Missing and not-owned lists raise the same ResourceNotFoundError
    - update() validates the patch before any storage access
    - owner_id is stamped from the caller's identity, never from input
"""

import logging

from tasklist.core.domain_types import UserId, ListId
from tasklist.core.entities import TodoList, ListPatch
from tasklist.core.errors import ResourceNotFoundError
from tasklist.core.repository_protocols import ListRepository
from tasklist.core.validate_input import check_list_patch

logger = logging.getLogger(__name__)


class TodoListService:
    """Ownership-scoped wrapper over ListRepository."""

    def __init__(self, repo: ListRepository):
        self.repo = repo

    async def create(self, user_id: UserId, todo_list: TodoList) -> ListId:
        todo_list.owner_id = user_id
        return await self.repo.create(user_id, todo_list)

    async def get_all(self, user_id: UserId) -> list[TodoList]:
        return await self.repo.list_by_owner(user_id)

    async def get_by_id(self, user_id: UserId, list_id: ListId) -> TodoList:
        """Return the list if it exists and belongs to user_id."""
        todo_list = await self.repo.get(list_id)
        if todo_list is None or todo_list.owner_id != user_id:
            logger.info(
                "List lookup denied",
                extra={"user_id": user_id, "list_id": list_id},
            )
            raise ResourceNotFoundError("List", list_id)
        return todo_list

    async def update(self, user_id: UserId, list_id: ListId, patch: ListPatch) -> None:
        check_list_patch(patch)
        await self.get_by_id(user_id, list_id)
        await self.repo.update(list_id, patch)

    async def delete(self, user_id: UserId, list_id: ListId) -> None:
        """Delete a list and, through the store, all of its items."""
        await self.get_by_id(user_id, list_id)
        await self.repo.delete(list_id)
