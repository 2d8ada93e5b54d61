"""
Exercise Tracker API entrypoint.

``create_app`` assembles the FastAPI application: logging, CORS, the
exercise routers under ``/api/exercise`` and the hard-error handlers. The
store client is opened in the lifespan and closed on shutdown.

Run with::

    python main.py
    uvicorn main:app --port 3000
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api import exercises, users
from config.settings import Settings, settings as default_settings
from constants import ApiRoutes
from database import Store
from utils.error_handlers import register_error_handlers
from utils.logging_utils import clear_logging_context, configure_logging, set_logging_context
from utils.uuid_helper import generate_uuid

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store at startup, release it at shutdown"""
    app_settings: Settings = app.state.settings

    # Startup
    if getattr(app.state, "store", None) is None:
        app.state.store = Store(app_settings.database_url, echo=app_settings.sql_echo)
    store: Store = app.state.store
    await store.create_all()
    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await store.dispose()
    app.state.store = None


def create_app(app_settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Build and configure the application.

    Args:
        app_settings: Settings to use; defaults to the environment
        store: Pre-built store client; by default one is created from
            ``app_settings.database_url`` during startup

    Returns:
        Configured FastAPI instance
    """
    app_settings = app_settings or default_settings
    configure_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(title="Exercise Tracker", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        set_logging_context(request_id=generate_uuid(), method=request.method, path=request.url.path)
        try:
            return await call_next(request)
        finally:
            clear_logging_context()

    app.include_router(users.router, prefix=ApiRoutes.PREFIX, tags=["users"])
    app.include_router(exercises.router, prefix=ApiRoutes.PREFIX, tags=["exercises"])

    register_error_handlers(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Exercise Tracker on http://{default_settings.host}:{default_settings.port}...")
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
