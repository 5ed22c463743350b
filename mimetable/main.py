from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mimetable import __version__
from mimetable.dependencies import get_magic_table
from mimetable.routers import health, mime

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the shared table up front so a broken magic file fails startup
    table = get_magic_table()
    logger.info("Serving MIME lookups from %s", table.source)
    yield


app = FastAPI(
    title="mimetable",
    description="File extension to MIME type lookups from a magic table",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(mime.router)
