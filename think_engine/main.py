"""Think Engine API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ThinkEngineError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The engine (ToolDispatch) is built once per app in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Engine on app.state, not a module global: tests build isolated engines freely
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from think_engine.api.error_handlers import register_error_handlers
from think_engine.api.routes import health, personas, sessions, tools
from think_engine.config import get_settings
from think_engine.core.persona_library import build_default_registry
from think_engine.infrastructure.observability import setup_logging
from think_engine.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.dispatch = ToolDispatch(settings, build_default_registry())
    logger.info("Think Engine API started")
    yield
    logger.info("Think Engine API shutting down")


settings = get_settings()
app = FastAPI(
    title="Think Engine API", version=settings.engine_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(tools.router)
app.include_router(personas.router)
app.include_router(sessions.router)

register_error_handlers(app)
