from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loanquote.api import api_router
from loanquote.core.config import get_settings
from loanquote.core.logging import configure_logging, get_logger

configure_logging(get_settings().log_level)
logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(_app: FastAPI):
    logger.info("FastAPI application started, market file %s", get_settings().market_file)
    yield


app = FastAPI(title="Loan Quote", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
