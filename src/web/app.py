"""FastAPI application entry point."""

import os
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cli.logging_config import setup_logging
from web.deps import get_config
from web.routes import journal, stats, trends

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    setup_logging(
        json_mode=True,
        level=config.logging.level,
        log_file=config.paths.log_file,
        file_level=config.logging.file_level,
    )
    logger.info("web.startup", journal_dir=str(config.paths.journal_dir))
    yield
    logger.info("web.shutdown")


app = FastAPI(
    title="Mood Journal",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS: allow the frontend origin
frontend_origin = os.getenv("FRONTEND_ORIGIN", "http://localhost:3000")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[frontend_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(journal.router)
app.include_router(trends.router)
app.include_router(stats.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
