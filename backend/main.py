from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from sqlalchemy.engine import Engine

from app.core.config import Settings, settings as default_settings
from app.core.database import init_db, make_engine
from app.core.logging_config import setup_logging
from app.api import api_router
from app.services import StoreError


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application; the store is opened at startup and closed at shutdown.

    Passing ``engine`` skips building one from ``settings.database_url``;
    the caller keeps ownership of it and it is not disposed at shutdown.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = engine is None
        app.state.engine = make_engine(settings.database_url, echo=settings.db_echo) if owned else engine
        init_db(app.state.engine)
        try:
            yield
        finally:
            if owned:
                app.state.engine.dispose()

    app = FastAPI(title=settings.app_title, lifespan=lifespan)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> Response:
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    app.include_router(api_router)
    return app


app = create_app()
