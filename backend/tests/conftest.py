from __future__ import annotations

import os
import sys
from datetime import date, time
from decimal import Decimal
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure the project root (which exposes the ``backend`` package) is on ``sys.path``
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# The schema is created per test below, so the lifespan must not migrate.
os.environ["ENABLE_STARTUP_MIGRATIONS"] = "0"

from backend.gymdesk import models  # noqa: E402
from backend.gymdesk.database import Base, get_db  # noqa: E402
from backend.gymdesk.main import app  # noqa: E402

SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
# A single shared connection keeps the in-memory database visible to the
# threads TestClient dispatches requests on.
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            db_session.expire_all()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def member(db_session: Session) -> models.Member:
    record = models.Member(
        first_name="Ana",
        last_name="Lopez",
        email="ana.lopez@gymdesk.io",
        phone="555-0101",
        join_date=date(2024, 1, 2),
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


@pytest.fixture
def other_member(db_session: Session) -> models.Member:
    record = models.Member(
        first_name="Bruno",
        last_name="Diaz",
        email="bruno.diaz@gymdesk.io",
        join_date=date(2024, 1, 5),
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


@pytest.fixture
def trainer(db_session: Session) -> models.Trainer:
    record = models.Trainer(
        first_name="Carla",
        last_name="Mendez",
        email="carla.mendez@gymdesk.io",
        specialization="Strength",
        hourly_rate=Decimal("35.00"),
        hire_date=date(2023, 6, 1),
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


@pytest.fixture
def membership_type(db_session: Session) -> models.MembershipType:
    record = models.MembershipType(
        name="Monthly",
        description="One calendar month of access",
        duration_months=1,
        price=Decimal("50.00"),
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


@pytest.fixture
def gym_class(db_session: Session, trainer: models.Trainer) -> models.GymClass:
    record = models.GymClass(
        name="Morning HIIT",
        trainer_id=trainer.id,
        max_capacity=12,
        duration_minutes=45,
        class_date=date(2024, 3, 4),
        start_time=time(7, 30),
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record
