from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    String,
    Text,
)

from taskboard.core.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """
    Model for a task on the list.
    Note: The class name is singular (Task) while the table name is plural (tasks).
    """

    __tablename__ = "tasks"
    # ids are never reused after a delete
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    due_date = Column(Date, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    # manual order; neither contiguous nor unique, ties break on id
    sort_order = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} sort_order={self.sort_order} title={self.title!r}>"


class Item(Base):
    """A plain named entry, kept alongside tasks."""

    __tablename__ = "items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
