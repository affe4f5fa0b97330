import json
import logging
from datetime import date
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from taskboard.core.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False, **engine_kwargs):
    # check_same_thread is a sqlite-only connect argument
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url, connect_args=connect_args, echo=echo, **engine_kwargs
    )


# Create the SQLAlchemy engine
engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

# Create sessionmaker factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create a base class for our models
Base = declarative_base()


# Dependency to get a database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# init db
def init_db(bind=None):
    # important: ensures models are registered before creating tables
    import taskboard.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables initialized")


# seed_db() - ONLY loads data, and only into an empty database
def seed_db(session_factory=None, seed_file: str | Path | None = None) -> int:
    from taskboard.models import Item, Task

    session_factory = session_factory or SessionLocal
    seed_path = Path(seed_file or settings.SEED_FILE)
    if not seed_path.exists():
        logger.warning("Seed file %s not found, skipping seeding", seed_path)
        return 0

    with open(seed_path, "r") as f:
        seed_data = json.load(f)

    session = session_factory()
    try:
        if session.query(Task).count() > 0:
            logger.info("Database already has tasks, skipping seeding")
            return 0

        tasks_data = seed_data.get("tasks", [])
        for index, task_data in enumerate(tasks_data):
            task_data = dict(task_data)
            if task_data.get("due_date"):
                task_data["due_date"] = date.fromisoformat(task_data["due_date"])
            task_data.setdefault("sort_order", index)
            session.add(Task(**task_data))

        items_data = seed_data.get("items", [])
        for item_data in items_data:
            session.add(Item(**item_data))

        session.commit()
        logger.info("Loaded %d tasks and %d items", len(tasks_data), len(items_data))
        return len(tasks_data) + len(items_data)
    finally:
        session.close()
