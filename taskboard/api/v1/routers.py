from fastapi import APIRouter

from taskboard.api.v1.endpoints.item import router as item_router
from taskboard.api.v1.endpoints.task import router as task_router

router = APIRouter()
router.include_router(task_router, prefix="/tasks", tags=["tasks"])
router.include_router(item_router, prefix="/items", tags=["items"])
