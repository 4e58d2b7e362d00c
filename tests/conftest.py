import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# must be set before app.db.session builds the engine
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("DB_SSLMODE", None)

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session  # noqa: E402

from app.backend.main import app  # noqa: E402
from app.backend.services.task_store import TaskStore  # noqa: E402
from app.db import session as db_session  # noqa: E402


@pytest.fixture(autouse=True)
def _tables():
    db_session.create_all_tables()
    yield
    db_session.drop_all_tables()


@pytest.fixture
def db():
    with Session(db_session.engine) as s:
        yield s


@pytest.fixture
def store(db):
    return TaskStore(db)


@pytest.fixture
def client():
    return TestClient(app)
