from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends

from loanquote.api.deps import get_calculator, get_formatter, require_api_key
from loanquote.models import AvailableQuote, LoanQuote
from loanquote.schemas.request import QuoteRequest
from loanquote.schemas.response import MarketResponse, QuoteResponse, TierSchema
from loanquote.services import LoanCalculator, QuoteFormatter

router = APIRouter(prefix="/v1", tags=["quote"], dependencies=[Depends(require_api_key)])


@router.post("/quote", response_model=QuoteResponse, summary="Quote the cheapest loan the market can supply")
def create_quote(
    payload: QuoteRequest,
    calculator: LoanCalculator = Depends(get_calculator),
    formatter: QuoteFormatter = Depends(get_formatter),
) -> QuoteResponse:
    quote = calculator.calculate(Decimal(payload.amount))
    return _to_response(quote, formatter.format(quote))


@router.get("/market", response_model=MarketResponse, summary="Rate tiers of the loaded market")
def market(calculator: LoanCalculator = Depends(get_calculator)) -> MarketResponse:
    book = calculator.book
    return MarketResponse(
        total_supply=book.total_supply,
        tiers=[TierSchema(rate=tier.rate, amount=tier.amount) for tier in book.tiers],
    )


def _to_response(quote: LoanQuote, summary: str) -> QuoteResponse:
    if isinstance(quote, AvailableQuote):
        return QuoteResponse(
            requested_amount=quote.requested_amount,
            available=True,
            annual_rate=quote.annual_rate,
            monthly_repayment=quote.monthly_repayment,
            total_repayment=quote.total_repayment,
            summary=summary,
        )
    return QuoteResponse(requested_amount=quote.requested_amount, available=False, summary=summary)
