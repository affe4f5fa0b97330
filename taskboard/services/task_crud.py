"""
CRUD LAYER (Database Logic Only)

Architecture:
    API Layer  → FastAPI (routes, Depends, response_model)
    CRUD Layer → Pure DB operations (this file)
    DB Layer   → Engine, SessionLocal, Models

Rules:
✅ Accept SQLAlchemy Session explicitly.
❌ Never use Depends() here.
❌ Never open/close the session here.
❌ Return ORM models, NOT Pydantic schemas.
✅ Commit once per CREATE/UPDATE/DELETE/REORDER, so callers see all of it or none.
❌ No commit for READ operations.
✅ Use TaskUpdate.changes() (model_dump(exclude_unset=True)) for partial updates.
✅ Every write refreshes `updated_at`, whether or not a field actually changed.
❓ How To Handle "Task Not Found"?
    ❌ CRUD should NOT raise HTTPException. That belongs to API layer.
    ✅ CRUD returns None or False, and the API layer maps it to 404.
"""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.models import Task, utc_now
from taskboard.schemas import TaskCreate, TaskReorder, TaskUpdate

logger = logging.getLogger(__name__)


def next_sort_order(session: Session) -> int:
    # max over an empty table counts as 0, so the first task gets 1
    current_max = session.query(func.max(Task.sort_order)).scalar()
    return (current_max or 0) + 1


def create_task(session: Session, task: TaskCreate) -> Task:
    # new tasks land at the end of the manual order
    task_item = Task(**task.model_dump(), sort_order=next_sort_order(session))
    session.add(task_item)
    session.commit()
    session.refresh(task_item)
    logger.info("Created task %s with sort_order %s", task_item.id, task_item.sort_order)
    return task_item


def list_tasks(session: Session) -> list[Task]:
    # ordering is up to the sort resolver
    return session.query(Task).order_by(Task.id).all()


def get_task(session: Session, task_id: int) -> Task | None:
    return session.get(Task, task_id)


def update_task(session: Session, task_id: int, task: TaskUpdate) -> Task | None:
    task_item = session.get(Task, task_id)
    if not task_item:
        return None

    for key, value in task.changes().items():
        setattr(task_item, key, value)
    task_item.updated_at = utc_now()

    session.commit()
    session.refresh(task_item)
    return task_item


def toggle_task(session: Session, task_id: int) -> Task | None:
    task_item = session.get(Task, task_id)
    if not task_item:
        return None

    task_item.completed = not task_item.completed
    task_item.updated_at = utc_now()

    session.commit()
    session.refresh(task_item)
    return task_item


def delete_task(session: Session, task_id: int) -> bool:
    # hard delete; the remaining sort_order values keep their gaps
    task_item = session.get(Task, task_id)
    if not task_item:
        return False

    session.delete(task_item)
    session.commit()
    logger.info("Deleted task %s", task_id)
    return True


def reorder_tasks(session: Session, reorder: TaskReorder) -> int:
    """
    Write new sort_order values for the tasks named in `reorder`.

    Entries without both an id and a sort_order, and entries naming a task
    that does not exist, are skipped. Tasks left out keep their current
    sort_order, duplicates included. All writes share a single commit.

    Returns the number of distinct tasks updated; an id named twice counts
    once and keeps the last sort_order given for it.
    """
    written_ids = set()
    now = utc_now()
    for assignment in reorder.tasks:
        if not assignment.is_complete():
            logger.debug("Skipping incomplete reorder entry %r", assignment)
            continue

        task_item = session.get(Task, assignment.id)
        if not task_item:
            logger.debug("Skipping reorder entry for unknown task %s", assignment.id)
            continue

        task_item.sort_order = assignment.sort_order
        task_item.updated_at = now
        written_ids.add(task_item.id)

    session.commit()
    logger.info("Reordered %d tasks from %d entries", len(written_ids), len(reorder.tasks))
    return len(written_ids)
