# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import StartupError
from app.core.middleware import setup_exception_handlers, setup_middleware
from app.api.api import api_router
from app.api.routes_health import router as health_router
from app.db.init_db import init_db
from app.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect to the database and bootstrap the schema before serving.

    Any failure here aborts startup: the server never accepts requests
    without a working store.
    """
    settings: Settings = app.state.settings
    if not settings.database_url:
        raise StartupError("DATABASE_URL is not set")

    engine = build_engine(settings.database_url)
    try:
        init_db(engine)

        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        logger.info(f"Connected to database ({engine.url.get_backend_name()})")

        yield
    finally:
        engine.dispose()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    settings.setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ---------- MIDDLEWARE ----------
    setup_middleware(app)
    setup_exception_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
