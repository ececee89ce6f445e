"""TodoItem Service: owner-only access to items, transitive through the parent list.

Invariants:
    - create()/get_all() resolve the parent list via TodoListService.get_by_id first
    - Item lookups by id check the parent list's owner via get_with_owner
    - Missing and not-owned items raise the same ResourceNotFoundError
    - update() validates the patch before any storage access
"""

import logging

from tasklist.core.domain_types import UserId, ListId, ItemId
from tasklist.core.entities import TodoItem, ItemPatch
from tasklist.core.errors import ResourceNotFoundError
from tasklist.core.repository_protocols import ItemRepository
from tasklist.core.validate_input import check_item_patch
from tasklist.services.todo_list_service import TodoListService

logger = logging.getLogger(__name__)


class TodoItemService:
    """Ownership-scoped wrapper over ItemRepository."""

    def __init__(self, repo: ItemRepository, lists: TodoListService):
        self.repo = repo
        self.lists = lists

    async def create(self, user_id: UserId, list_id: ListId, item: TodoItem) -> ItemId:
        await self.lists.get_by_id(user_id, list_id)
        item.list_id = list_id
        return await self.repo.create(list_id, item)

    async def get_all(self, user_id: UserId, list_id: ListId) -> list[TodoItem]:
        await self.lists.get_by_id(user_id, list_id)
        return await self.repo.list_by_list(list_id)

    async def get_by_id(self, user_id: UserId, item_id: ItemId) -> TodoItem:
        """Return the item if its parent list belongs to user_id."""
        owned = await self.repo.get_with_owner(item_id)
        if owned is None or owned.owner_id != user_id:
            logger.info(
                "Item lookup denied",
                extra={"user_id": user_id, "item_id": item_id},
            )
            raise ResourceNotFoundError("Item", item_id)
        return owned.item

    async def update(self, user_id: UserId, item_id: ItemId, patch: ItemPatch) -> None:
        check_item_patch(patch)
        await self.get_by_id(user_id, item_id)
        await self.repo.update(item_id, patch)

    async def delete(self, user_id: UserId, item_id: ItemId) -> None:
        await self.get_by_id(user_id, item_id)
        await self.repo.delete(item_id)
