"""Kanban API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map KanbanError → structured JSON responses
    - Logging configured and database pool created once, in the lifespan
    - Pool disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from kanban_api.api.error_handlers import register_error_handlers
from kanban_api.api.routes import boards, cards, health
from kanban_api.config import get_settings
from kanban_api.infrastructure.database import close_db, init_db
from kanban_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.log_file)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Kanban API started")
    yield
    await close_db()
    logger.info("Kanban API shutting down")


app = FastAPI(title="Kanban API", version="0.1.0", lifespan=lifespan)

app.include_router(health.router)
app.include_router(boards.router)
app.include_router(cards.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "kanban_api.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
