from sqlalchemy.orm import Session

from taskboard.models import Item
from taskboard.schemas import ItemCreate


def create_item(session: Session, item: ItemCreate) -> Item:
    item_row = Item(**item.model_dump())
    session.add(item_row)
    session.commit()
    session.refresh(item_row)
    return item_row


def list_items(session: Session) -> list[Item]:
    # newest first
    return session.query(Item).order_by(Item.created_at.desc(), Item.id.desc()).all()


def delete_item(session: Session, item_id: int) -> bool:
    item_row = session.get(Item, item_id)
    if not item_row:
        return False

    session.delete(item_row)
    session.commit()
    return True
