"""
Shared test fixtures.

Provides an in-memory SQLite database, a fixed clock and ready-made
store/scheduler/study list objects wired to that database.
"""
import pytest
from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import studylist.models  # noqa: F401 - registers tables
from studylist.database import Base
from studylist.scheduler import ReviewScheduler
from studylist.store import StudyItemStore
from studylist.study_list import StudyList


def make_engine():
    return create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )


@pytest.fixture
def engine():
    """In-memory database with all tables created."""
    engine = make_engine()
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def now():
    """Fixed 'current time' so scheduling assertions are deterministic."""
    return datetime(2024, 3, 10, 9, 30, 15, tzinfo=timezone.utc)


@pytest.fixture
def scheduler():
    return ReviewScheduler()


@pytest.fixture
def store(session_factory):
    return StudyItemStore(session_factory)


@pytest.fixture
def study_list(store, scheduler):
    return StudyList(store, scheduler=scheduler)
