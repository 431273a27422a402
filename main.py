from contextlib import asynccontextmanager
import logging
import os

import uvicorn

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.interfaces.api.routes import register_routes
from app.infrastructure.database import initialize_database, engine
from app.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""

    initialize_database()
    logger.info("Database initialized")
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    configure_logging()
    app = FastAPI(title="Hostel Notifications API", lifespan=lifespan)

    # Mobile clients call from arbitrary origins.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on ``HOST``/``PORT`` (default 0.0.0.0:8000)."""

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
