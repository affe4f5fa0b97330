from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# range of an INTEGER column (64-bit signed)
DB_INT_MIN = -(2**63)
DB_INT_MAX = 2**63 - 1


class TaskCreate(BaseModel):
    title: str | None = Field(default=None, validate_default=True)
    description: str | None = ""
    due_date: date | None = None
    completed: bool = False

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise ValueError("Task title is required")
        return value.strip()

    @field_validator("description")
    @classmethod
    def description_defaults_to_empty(cls, value: str | None) -> str:
        return value or ""


class TaskUpdate(BaseModel):
    """
    Partial update for a task.

    Only the fields the caller actually sent are applied; `changes()` returns
    exactly those, so an omitted title and a blank title are told apart.
    """

    title: str | None = None
    description: str | None = None
    due_date: date | None = None
    completed: bool | None = None

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, value: str | None) -> str:
        # only runs when title was supplied
        if value is None or not value.strip():
            raise ValueError("Task title cannot be empty")
        return value.strip()

    @field_validator("description")
    @classmethod
    def description_defaults_to_empty(cls, value: str | None) -> str:
        return value or ""

    @field_validator("completed")
    @classmethod
    def completed_defaults_to_false(cls, value: bool | None) -> bool:
        return bool(value)

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str
    due_date: date | None = None
    completed: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SortAssignment(BaseModel):
    # entries missing either field are skipped by the reorder
    id: int | None = Field(default=None, ge=DB_INT_MIN, le=DB_INT_MAX)
    sort_order: int | None = Field(default=None, ge=DB_INT_MIN, le=DB_INT_MAX)

    def is_complete(self) -> bool:
        return bool(self.id) and self.sort_order is not None


class TaskReorder(BaseModel):
    tasks: list[SortAssignment] | None = Field(default=None, validate_default=True)

    @field_validator("tasks")
    @classmethod
    def tasks_must_not_be_empty(
        cls, value: list[SortAssignment] | None
    ) -> list[SortAssignment]:
        if not value:
            raise ValueError("Tasks array is required")
        return value


class ReorderResponse(BaseModel):
    message: str
    updated: int


class DeleteResponse(BaseModel):
    message: str
    id: int


class ItemCreate(BaseModel):
    name: str | None = Field(default=None, validate_default=True)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise ValueError("Item name is required")
        return value


class ItemResponse(BaseModel):
    id: int
    name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
