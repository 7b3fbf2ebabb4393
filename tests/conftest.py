"""Shared test fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event as sa_event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.api.health import router as health_router
from src.api.village import router as village_router
from src.core.engine import VillageEngine
from src.core.event_bus import EventBus
from src.core.npc.agent import CognitionConfig
from src.core.population import Population
from src.core.roster import default_roster
from src.db.database import get_db
from src.db.models import Base


class FakeClock:
    """수동으로 진행하는 테스트용 시계"""

    def __init__(self, start: float = 0.0, step: float = 1.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_clock():
    """시작 시각을 지정한 FakeClock 생성기"""
    return FakeClock


@pytest.fixture()
def db_engine():
    """인메모리 SQLite (FK 활성화)"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @sa_event.listens_for(engine, "connect")
    def _set_fk(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(db_engine) -> Session:
    """Raw database session for direct DB assertions."""
    session = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def population(clock) -> Population:
    return Population(default_roster(), CognitionConfig(), clock)


@pytest.fixture()
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def village(population, event_bus) -> VillageEngine:
    return VillageEngine(population, event_bus)


@pytest.fixture()
def client(db_engine, village, event_bus) -> TestClient:
    """FastAPI TestClient wired to an in-memory SQLite database."""
    session_factory = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)

    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = FastAPI()
    app.include_router(health_router)
    app.include_router(village_router)
    app.state.engine = village
    app.state.event_bus = event_bus
    app.dependency_overrides[get_db] = _override_get_db

    with TestClient(app) as tc:
        yield tc
