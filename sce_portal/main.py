# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sce_portal.api.errors import register_exception_handlers
from sce_portal.config import settings
from sce_portal.database import SessionLocal, init_db
from sce_portal.repositories import Store
from sce_portal.schemas.common import HealthResponse
from sce_portal.services.seed_service import seed_store
from sce_portal.storage import DatabaseStorage

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing storage...")
    init_db()

    db = SessionLocal()
    try:
        seed_store(Store(DatabaseStorage(db)))
    finally:
        db.close()

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.APP_NAME,
    description="Content and membership portal of the SCE Foundation",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from sce_portal.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
