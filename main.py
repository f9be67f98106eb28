"""Daycare Reports API application entry point."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()  # load .env before anything reads os.getenv()

from fastapi import FastAPI

from app.api.routes import (
    attendances_router, children_router, health_router,
    observations_router, reports_router,
)
from app.services.database import DATABASE_URL, create_tables

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database tables at startup."""
    await create_tables()
    logger.info("SQLite tables ready at %s", DATABASE_URL)

    yield

    logger.info("Daycare Reports API stopped")


app = FastAPI(
    title="Daycare Reports API",
    description=(
        "Daily observations, attendance and narrative progress reports "
        "for children in daycare."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(children_router)
app.include_router(attendances_router)
app.include_router(observations_router)
app.include_router(reports_router)
