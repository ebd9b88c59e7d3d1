from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.core.database import init_db
from app.services import UserService
from main import create_app


@pytest.fixture()
def engine() -> Engine:
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    init_db(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture()
def service(session: Session) -> UserService:
    return UserService(session)


@pytest.fixture()
def client(engine: Engine) -> Iterator[TestClient]:
    with TestClient(create_app(engine=engine)) as test_client:
        yield test_client
