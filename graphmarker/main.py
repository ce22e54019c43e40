"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graphmarker.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.graphmarker_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="graphmarker",
        description="Marks sketched graph answers against shape specifications",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Importing the engine registers every feature kind
    from graphmarker.engine.registry import get_registry
    from graphmarker.api.router import api_router

    app.include_router(api_router)
    logger.info("Serving %d feature kinds", get_registry().count)

    return app


app = create_app()
