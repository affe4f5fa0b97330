"""
SORT RESOLVER (Pure, no database access)

Turns a requested sort key and direction into a deterministic total order
over a set of tasks.

Rules:
✅ Unknown sort keys fall back to `created_at`, unknown directions to `DESC`.
✅ A missing `due_date` sorts before every real date when ascending.
✅ Equal keys always come out in ascending id order, in both directions.
❌ Never touches the session or mutates a task.
"""

from collections.abc import Callable, Iterable
from datetime import date
from enum import Enum
from operator import attrgetter
from typing import Any

from taskboard.models import Task


class SortField(str, Enum):
    CREATED_AT = "created_at"
    DUE_DATE = "due_date"
    COMPLETED = "completed"
    SORT_ORDER = "sort_order"
    TITLE = "title"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


DEFAULT_SORT_FIELD = SortField.CREATED_AT
DEFAULT_SORT_DIRECTION = SortDirection.DESC


def parse_sort_field(value: str | None) -> SortField:
    try:
        return SortField(value)
    except ValueError:
        return DEFAULT_SORT_FIELD


def parse_sort_direction(value: str | None) -> SortDirection:
    try:
        return SortDirection((value or "").upper())
    except ValueError:
        return DEFAULT_SORT_DIRECTION


def _due_date_key(task: Task) -> tuple[bool, date]:
    # (False, ...) puts missing dates ahead of every real date
    if task.due_date is None:
        return (False, date.min)
    return (True, task.due_date)


SORT_KEYS: dict[SortField, Callable[[Task], Any]] = {
    SortField.CREATED_AT: attrgetter("created_at"),
    SortField.DUE_DATE: _due_date_key,
    SortField.COMPLETED: lambda task: bool(task.completed),
    SortField.SORT_ORDER: attrgetter("sort_order"),
    SortField.TITLE: attrgetter("title"),
}


def resolve_order(
    tasks: Iterable[Task],
    sort_by: SortField | str | None = DEFAULT_SORT_FIELD,
    direction: SortDirection | str | None = DEFAULT_SORT_DIRECTION,
) -> list[Task]:
    field = parse_sort_field(sort_by)
    direction = parse_sort_direction(direction)

    # sorted() is stable, also with reverse=True, so the id order survives
    # among tasks with equal keys
    by_id = sorted(tasks, key=attrgetter("id"))
    return sorted(
        by_id,
        key=SORT_KEYS[field],
        reverse=direction is SortDirection.DESC,
    )
