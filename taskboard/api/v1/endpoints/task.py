from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.core.errors import validate_body
from taskboard.schemas import (
    DB_INT_MAX,
    DB_INT_MIN,
    DeleteResponse,
    ReorderResponse,
    TaskCreate,
    TaskReorder,
    TaskResponse,
    TaskUpdate,
)
from taskboard.services.sorting import (
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    resolve_order,
)
from taskboard.services.task_crud import (
    create_task,
    delete_task,
    get_task,
    list_tasks,
    reorder_tasks,
    toggle_task,
    update_task,
)

router = APIRouter()

TASK_NOT_FOUND = "Task not found"

# ids outside the column range are malformed, not missing
TaskId = Annotated[int, Path(ge=DB_INT_MIN, le=DB_INT_MAX)]


# reorder tasks; declared before the /{task_id} routes so "reorder" is not read as an id
@router.put(
    "/reorder",
    response_model=ReorderResponse,
    status_code=200,
)
def reorder_tasks_endpoint(
    reorder: TaskReorder,
    session: Session = Depends(get_db),
):
    updated = reorder_tasks(session, reorder)
    return ReorderResponse(message="Tasks reordered successfully", updated=updated)


# list tasks, sorted
@router.get("", response_model=list[TaskResponse], status_code=200)
def list_tasks_endpoint(
    session: Session = Depends(get_db),
    sort_by: str = Query(
        default=DEFAULT_SORT_FIELD.value,
        alias="sortBy",
        description="created_at, due_date, completed, sort_order or title.",
    ),
    order: str = Query(
        default=DEFAULT_SORT_DIRECTION.value,
        description="ASC or DESC. Anything else means DESC.",
    ),
):
    return resolve_order(list_tasks(session), sort_by, order)


# create a new task
@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
)
def create_task_endpoint(
    task: TaskCreate,
    session: Session = Depends(get_db),
):
    return create_task(session, task)


# get a task by id
@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    status_code=200,
)
def get_task_endpoint(
    task_id: TaskId,
    session: Session = Depends(get_db),
):
    task_item = get_task(session, task_id)
    if not task_item:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return task_item


# update a task by id
@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    status_code=200,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": TaskUpdate.model_json_schema()}}
        }
    },
)
def update_task_endpoint(
    task_id: TaskId,
    payload: dict[str, Any] | None = Body(default=None),
    session: Session = Depends(get_db),
):
    # a missing task is a 404 even when the body is also invalid
    if not get_task(session, task_id):
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    task = validate_body(TaskUpdate, payload)
    return update_task(session, task_id, task)


# flip completion of a task by id
@router.patch(
    "/{task_id}/toggle",
    response_model=TaskResponse,
    status_code=200,
)
def toggle_task_endpoint(
    task_id: TaskId,
    session: Session = Depends(get_db),
):
    task_item = toggle_task(session, task_id)
    if not task_item:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return task_item


# delete a task by id
@router.delete(
    "/{task_id}",
    response_model=DeleteResponse,
    status_code=200,
)
def delete_task_endpoint(
    task_id: TaskId,
    session: Session = Depends(get_db),
):
    if not delete_task(session, task_id):
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)
    return DeleteResponse(message="Task deleted successfully", id=task_id)
