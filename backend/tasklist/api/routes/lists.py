"""List Routes: CRUD over the caller's own todo lists, plus item creation/listing.

Invariants:
    - Every route requires a valid bearer token (get_current_user_id)
    - Another user's list answers exactly like a missing list (404)
"""

from fastapi import APIRouter, Depends, status

from tasklist.api.dependencies import (
    get_current_user_id, get_list_service, get_item_service,
)
from tasklist.core.domain_types import UserId, ListId
from tasklist.schemas.todo import (
    ListCreate, ListUpdate, ListResponse, ItemCreate, ItemResponse,
    CreatedResponse, StatusResponse,
)
from tasklist.services.todo_item_service import TodoItemService
from tasklist.services.todo_list_service import TodoListService

router = APIRouter(prefix="/api/lists", tags=["lists"])


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED,
)
async def create_list(
    body: ListCreate,
    user_id: UserId = Depends(get_current_user_id),
    lists: TodoListService = Depends(get_list_service),
):
    list_id = await lists.create(user_id, body.to_entity())
    return CreatedResponse(id=list_id)


@router.get("")
async def get_all_lists(
    user_id: UserId = Depends(get_current_user_id),
    lists: TodoListService = Depends(get_list_service),
):
    """All lists owned by the caller, wrapped in a data envelope."""
    owned = await lists.get_all(user_id)
    return {"data": [ListResponse.from_entity(todo_list) for todo_list in owned]}


@router.get("/{list_id}", response_model=ListResponse)
async def get_list(
    list_id: int,
    user_id: UserId = Depends(get_current_user_id),
    lists: TodoListService = Depends(get_list_service),
):
    return ListResponse.from_entity(await lists.get_by_id(user_id, ListId(list_id)))


@router.put("/{list_id}", response_model=StatusResponse)
async def update_list(
    list_id: int,
    body: ListUpdate,
    user_id: UserId = Depends(get_current_user_id),
    lists: TodoListService = Depends(get_list_service),
):
    await lists.update(user_id, ListId(list_id), body.to_patch())
    return StatusResponse()


@router.delete("/{list_id}", response_model=StatusResponse)
async def delete_list(
    list_id: int,
    user_id: UserId = Depends(get_current_user_id),
    lists: TodoListService = Depends(get_list_service),
):
    """Delete a list together with its items."""
    await lists.delete(user_id, ListId(list_id))
    return StatusResponse()


@router.post(
    "/{list_id}/items", response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(
    list_id: int,
    body: ItemCreate,
    user_id: UserId = Depends(get_current_user_id),
    items: TodoItemService = Depends(get_item_service),
):
    item_id = await items.create(user_id, ListId(list_id), body.to_entity())
    return CreatedResponse(id=item_id)


@router.get("/{list_id}/items", response_model=list[ItemResponse])
async def get_all_items(
    list_id: int,
    user_id: UserId = Depends(get_current_user_id),
    items: TodoItemService = Depends(get_item_service),
):
    found = await items.get_all(user_id, ListId(list_id))
    return [ItemResponse.from_entity(item) for item in found]
