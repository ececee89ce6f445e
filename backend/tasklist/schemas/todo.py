"""Todo Schemas: list and item payloads.

Invariants:
    - Create payloads require a non-blank title
    - Update payloads are partial; None means "leave unchanged"
    - Titles are stripped on create and update alike
    - Responses mirror core entities field for field
"""

from pydantic import BaseModel, Field, field_validator

from tasklist.core.entities import TodoList, TodoItem, ListPatch, ItemPatch


class ListCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field("", max_length=10_000)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    def to_entity(self) -> TodoList:
        return TodoList(title=self.title, description=self.description)


class ListUpdate(BaseModel):
    title: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=10_000)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else v

    def to_patch(self) -> ListPatch:
        return ListPatch(title=self.title, description=self.description)


class ItemCreate(ListCreate):
    done: bool = False

    def to_entity(self) -> TodoItem:
        return TodoItem(
            title=self.title, description=self.description, done=self.done,
        )


class ItemUpdate(ListUpdate):
    done: bool | None = None

    def to_patch(self) -> ItemPatch:
        return ItemPatch(
            title=self.title, description=self.description, done=self.done,
        )


class ListResponse(BaseModel):
    id: int
    title: str
    description: str

    @classmethod
    def from_entity(cls, todo_list: TodoList) -> "ListResponse":
        return cls(
            id=todo_list.id, title=todo_list.title,
            description=todo_list.description,
        )


class ItemResponse(BaseModel):
    id: int
    list_id: int
    title: str
    description: str
    done: bool

    @classmethod
    def from_entity(cls, item: TodoItem) -> "ItemResponse":
        return cls(
            id=item.id, list_id=item.list_id, title=item.title,
            description=item.description, done=item.done,
        )


class CreatedResponse(BaseModel):
    id: int


class StatusResponse(BaseModel):
    status: str = "ok"
