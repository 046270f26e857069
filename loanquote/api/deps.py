from __future__ import annotations

import secrets
from functools import lru_cache

from fastapi import Header, HTTPException, status

from loanquote.core.config import get_settings
from loanquote.core.logging import get_logger
from loanquote.services import LoanCalculator, MarketReader, QuoteFormatter

logger = get_logger(__name__)


@lru_cache
def get_calculator() -> LoanCalculator:
    settings = get_settings()
    reader = MarketReader(separator=settings.market_separator, skip_header=settings.market_skip_header)
    return LoanCalculator(reader.read(settings.market_file))


@lru_cache
def get_formatter() -> QuoteFormatter:
    return QuoteFormatter()


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    """Guard the quote routes with the shared key from ``API_KEY``."""

    expected = get_settings().api_key
    if expected is None:
        logger.error("API_KEY is not set, rejecting quote request")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Quote service API key not configured",
        )
    if x_api_key is None or not secrets.compare_digest(x_api_key.encode(), expected.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid X-API-Key header",
        )
