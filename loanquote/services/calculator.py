from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from loanquote.core.logging import get_logger
from loanquote.models import (
    AvailableQuote,
    InsufficientSupply,
    LoanQuote,
    Offer,
    OfferBook,
    UnavailableQuote,
)

from .allocator import allocate
from .amortization import blend_rate, repayments
from .offer_book import build_offer_book

logger = get_logger(__name__)


def quote_loan(book: OfferBook, requested_amount: Decimal) -> LoanQuote:
    allocation = allocate(book, requested_amount)
    if isinstance(allocation, InsufficientSupply):
        return UnavailableQuote(requested_amount=requested_amount)
    monthly_repayment, total_repayment = repayments(allocation)
    return AvailableQuote(
        requested_amount=requested_amount,
        annual_rate=blend_rate(allocation),
        monthly_repayment=monthly_repayment,
        total_repayment=total_repayment,
    )


class LoanCalculator:
    """Quotes loans against one market snapshot.

    The offer book is built once on construction and never changes, so one
    calculator can serve any number of requests, concurrently if need be.
    """

    def __init__(self, offers: Iterable[Offer]) -> None:
        self.book = build_offer_book(offers)
        logger.debug(
            "offer book ready: %d tiers, total supply %s", len(self.book), self.book.total_supply
        )

    def calculate(self, requested_amount: Decimal) -> LoanQuote:
        quote = quote_loan(self.book, requested_amount)
        if not quote.is_available:
            logger.info(
                "requested %s exceeds market supply %s", requested_amount, self.book.total_supply
            )
        return quote
