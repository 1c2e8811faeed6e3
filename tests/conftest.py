import os
import pathlib
import sys
from datetime import datetime, timedelta, timezone

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_TIMEZONE", "UTC")

import pytest

from notifyhub.config import Settings
from notifyhub.domain.entities import Project, ResourceType, User
from notifyhub.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from notifyhub.infrastructure.repositories import (
    ProjectRepository,
    ProjectResourceRepository,
    UserRepository,
)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine():
    engine = build_engine(Settings(database_url="sqlite://"))
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def users(session) -> dict[str, User]:
    repository = UserRepository(session)
    return {
        login: repository.create(User(id=None, login_id=login, name=login.title()))
        for login in ("alice", "bob", "carol", "dave")
    }


@pytest.fixture
def project(session) -> Project:
    return ProjectRepository(session).create(Project(id=None, name="hive"))


@pytest.fixture
def issue_id(session, project) -> str:
    ProjectResourceRepository(session).register(ResourceType.ISSUE_POST, "17", project.id)
    return "17"
