from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

MIN_LOAN_AMOUNT = 1000
MAX_LOAN_AMOUNT = 15000
LOAN_AMOUNT_STEP = 100


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    market_file: str = "data/market.csv"
    market_separator: str = ","
    market_skip_header: bool = True
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings(
        api_key=os.getenv("API_KEY"),
        market_file=os.getenv("MARKET_FILE", "data/market.csv"),
        market_separator=os.getenv("MARKET_SEPARATOR", ","),
        market_skip_header=_env_flag("MARKET_SKIP_HEADER", default=True),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


def validate_loan_amount(value: int) -> int:
    """Check a requested loan amount against the bounds the market accepts."""

    if value < MIN_LOAN_AMOUNT or value > MAX_LOAN_AMOUNT:
        raise ValueError(f"loan amount must be within {MIN_LOAN_AMOUNT}-{MAX_LOAN_AMOUNT}, got {value}")
    if value % LOAN_AMOUNT_STEP != 0:
        raise ValueError(f"loan amount must be a multiple of {LOAN_AMOUNT_STEP}, got {value}")
    return value


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"true", "1", "yes"}
