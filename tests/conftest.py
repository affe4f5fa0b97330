from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from taskboard.core.database import create_db_engine, get_db, init_db
from taskboard.models import Task

BASE_TIME = datetime(2025, 12, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    # one shared in-memory database per test
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_tasks(session):
    # three tasks with sort_order 0, 1, 2 and creation times a minute apart
    rows = [
        ("Test Task 1", "Description 1", date(2025, 12, 30), False, 0),
        ("Test Task 2", "Description 2", date(2025, 12, 25), True, 1),
        ("Test Task 3", "", None, False, 2),
    ]
    tasks = []
    for offset, (title, description, due_date, completed, sort_order) in enumerate(rows):
        stamp = BASE_TIME + timedelta(minutes=offset)
        task = Task(
            title=title,
            description=description,
            due_date=due_date,
            completed=completed,
            sort_order=sort_order,
            created_at=stamp,
            updated_at=stamp,
        )
        session.add(task)
        tasks.append(task)
    session.commit()
    for task in tasks:
        session.refresh(task)
    return tasks
