from typing import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session


def make_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # requests are served from the threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=echo, pool_pre_ping=True, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    # Import models so metadata contains the users table
    import app.models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    with Session(request.app.state.engine) as session:
        yield session
