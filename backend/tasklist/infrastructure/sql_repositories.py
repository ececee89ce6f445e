"""SQL Repositories: SQLAlchemy implementations of the Storage Backend protocols.

Invariants:
    - One AsyncSession per repository, borrowed from the request (never opened here)
    - Mutations commit before returning; failures roll back and raise StorageError
    - Unique-username violations raise DuplicateUsernameError, not StorageError
    - ORM rows never leave this module; callers receive core entities
    - Deleting a list cascades to its items through the ORM relationship
    - Ids outside the key range read as missing rows, never reach the driver
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tasklist.core.domain_types import UserId, ListId, ItemId
from tasklist.core.entities import (
    User, TodoList, TodoItem, ListPatch, ItemPatch, OwnedItem,
)
from tasklist.core.errors import DuplicateUsernameError
from tasklist.infrastructure.database import storage_errors
from tasklist.models import (
    User as UserModel,
    TodoList as TodoListModel,
    TodoItem as TodoItemModel,
)

logger = logging.getLogger(__name__)

# Upper bound of the INTEGER primary keys; larger ids cannot name a row.
MAX_ROW_ID = 2**31 - 1


def _storable(row_id: int) -> bool:
    return 0 < row_id <= MAX_ROW_ID


def _to_user(row: UserModel) -> User:
    return User(
        id=UserId(row.id),
        username=row.username,
        password_hash=row.password_hash,
        name=row.name,
    )


def _to_list(row: TodoListModel) -> TodoList:
    return TodoList(
        id=ListId(row.id),
        owner_id=UserId(row.owner_id),
        title=row.title,
        description=row.description,
    )


def _to_item(row: TodoItemModel) -> TodoItem:
    return TodoItem(
        id=ItemId(row.id),
        list_id=ListId(row.list_id),
        title=row.title,
        description=row.description,
        done=row.done,
    )


class SqlUserRepository:
    """Credential Store backed by the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user: User) -> UserId:
        row = UserModel(
            name=user.name,
            username=user.username,
            password_hash=user.password_hash,
        )
        async with storage_errors(self.db, "create_user"):
            self.db.add(row)
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                raise DuplicateUsernameError(user.username)
        return UserId(row.id)

    async def find_by_username(self, username: str) -> User | None:
        async with storage_errors(self.db, "find_user"):
            result = await self.db.execute(
                select(UserModel).where(UserModel.username == username),
            )
            row = result.scalar_one_or_none()
        return _to_user(row) if row else None


class SqlListRepository:
    """TodoList persistence backed by the todo_lists table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, owner_id: UserId, todo_list: TodoList) -> ListId:
        row = TodoListModel(
            owner_id=owner_id,
            title=todo_list.title,
            description=todo_list.description,
        )
        async with storage_errors(self.db, "create_list"):
            self.db.add(row)
            await self.db.commit()
        return ListId(row.id)

    async def list_by_owner(self, owner_id: UserId) -> list[TodoList]:
        async with storage_errors(self.db, "list_lists"):
            result = await self.db.execute(
                select(TodoListModel)
                .where(TodoListModel.owner_id == owner_id)
                .order_by(TodoListModel.id),
            )
            rows = result.scalars().all()
        return [_to_list(row) for row in rows]

    async def get(self, list_id: ListId) -> TodoList | None:
        if not _storable(list_id):
            return None
        async with storage_errors(self.db, "get_list"):
            row = await self.db.get(TodoListModel, list_id)
        return _to_list(row) if row else None

    async def update(self, list_id: ListId, patch: ListPatch) -> None:
        async with storage_errors(self.db, "update_list"):
            row = await self.db.get(TodoListModel, list_id)
            if row is None:
                return
            for name, value in patch.changes().items():
                setattr(row, name, value)
            await self.db.commit()

    async def delete(self, list_id: ListId) -> None:
        async with storage_errors(self.db, "delete_list"):
            row = await self.db.get(TodoListModel, list_id)
            if row is None:
                return
            await self.db.delete(row)
            await self.db.commit()
        logger.info("List deleted", extra={"list_id": list_id})


class SqlItemRepository:
    """TodoItem persistence backed by the todo_items table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, list_id: ListId, item: TodoItem) -> ItemId:
        row = TodoItemModel(
            list_id=list_id,
            title=item.title,
            description=item.description,
            done=item.done,
        )
        async with storage_errors(self.db, "create_item"):
            self.db.add(row)
            await self.db.commit()
        return ItemId(row.id)

    async def list_by_list(self, list_id: ListId) -> list[TodoItem]:
        async with storage_errors(self.db, "list_items"):
            result = await self.db.execute(
                select(TodoItemModel)
                .where(TodoItemModel.list_id == list_id)
                .order_by(TodoItemModel.id),
            )
            rows = result.scalars().all()
        return [_to_item(row) for row in rows]

    async def get_with_owner(self, item_id: ItemId) -> OwnedItem | None:
        """Load an item together with its parent list's owner_id."""
        if not _storable(item_id):
            return None
        async with storage_errors(self.db, "get_item"):
            result = await self.db.execute(
                select(TodoItemModel, TodoListModel.owner_id)
                .join(TodoListModel, TodoItemModel.list_id == TodoListModel.id)
                .where(TodoItemModel.id == item_id),
            )
            row = result.one_or_none()
        if row is None:
            return None
        item_row, owner_id = row
        return OwnedItem(item=_to_item(item_row), owner_id=UserId(owner_id))

    async def update(self, item_id: ItemId, patch: ItemPatch) -> None:
        async with storage_errors(self.db, "update_item"):
            row = await self.db.get(TodoItemModel, item_id)
            if row is None:
                return
            for name, value in patch.changes().items():
                setattr(row, name, value)
            await self.db.commit()

    async def delete(self, item_id: ItemId) -> None:
        async with storage_errors(self.db, "delete_item"):
            row = await self.db.get(TodoItemModel, item_id)
            if row is None:
                return
            await self.db.delete(row)
            await self.db.commit()
