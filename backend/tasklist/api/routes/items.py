"""Item Routes: read/update/delete a single item by id.

Invariants:
    - Ownership is resolved through the item's parent list
    - Another user's item answers exactly like a missing item (404)
"""

from fastapi import APIRouter, Depends

from tasklist.api.dependencies import get_current_user_id, get_item_service
from tasklist.core.domain_types import UserId, ItemId
from tasklist.schemas.todo import ItemUpdate, ItemResponse, StatusResponse
from tasklist.services.todo_item_service import TodoItemService

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: int,
    user_id: UserId = Depends(get_current_user_id),
    items: TodoItemService = Depends(get_item_service),
):
    return ItemResponse.from_entity(await items.get_by_id(user_id, ItemId(item_id)))


@router.put("/{item_id}", response_model=StatusResponse)
async def update_item(
    item_id: int,
    body: ItemUpdate,
    user_id: UserId = Depends(get_current_user_id),
    items: TodoItemService = Depends(get_item_service),
):
    await items.update(user_id, ItemId(item_id), body.to_patch())
    return StatusResponse()


@router.delete("/{item_id}", response_model=StatusResponse)
async def delete_item(
    item_id: int,
    user_id: UserId = Depends(get_current_user_id),
    items: TodoItemService = Depends(get_item_service),
):
    await items.delete(user_id, ItemId(item_id))
    return StatusResponse()
