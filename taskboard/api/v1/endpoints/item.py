from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from taskboard.core.database import get_db
from taskboard.schemas import (
    DB_INT_MAX,
    DB_INT_MIN,
    DeleteResponse,
    ItemCreate,
    ItemResponse,
)
from taskboard.services.item_crud import create_item, delete_item, list_items

router = APIRouter()

ItemId = Annotated[int, Path(ge=DB_INT_MIN, le=DB_INT_MAX)]


@router.get("", response_model=list[ItemResponse], status_code=200)
def list_items_endpoint(
    session: Session = Depends(get_db),
):
    return list_items(session)


@router.post(
    "",
    response_model=ItemResponse,
    status_code=201,
)
def create_item_endpoint(
    item: ItemCreate,
    session: Session = Depends(get_db),
):
    return create_item(session, item)


@router.delete(
    "/{item_id}",
    response_model=DeleteResponse,
    status_code=200,
)
def delete_item_endpoint(
    item_id: ItemId,
    session: Session = Depends(get_db),
):
    if not delete_item(session, item_id):
        raise HTTPException(status_code=404, detail="Item not found")
    return DeleteResponse(message="Item deleted successfully", id=item_id)
