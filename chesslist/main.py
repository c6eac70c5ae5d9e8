from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from chesslist.api.endpoints import tournaments as tournament_endpoints
from chesslist.core.config import settings
from chesslist.core.exceptions import register_exception_handlers
from chesslist.core.log_config import configure_logging
from chesslist.models import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Chess tournament listing API started")
    yield


configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Chess Tournament Listing API", lifespan=lifespan)

register_exception_handlers(app)

# Include routers
app.include_router(tournament_endpoints.router, prefix="/api/v1/tournaments", tags=["Tournaments"])


@app.get("/")
async def read_root():
    return {"message": "Chess Tournament Listing API"}
