from decimal import Decimal

import pytest

from loanquote.models import AvailableQuote, UnavailableQuote
from loanquote.services import QuoteFormatter

EXPECTED = (
    "Requested amount: £1000\n"
    "Rate: 7.0%\n"
    "Monthly repayment: £30.78\n"
    "Total repayment: £1108.10"
)


@pytest.mark.parametrize(
    ("requested", "rate", "monthly", "total"),
    [
        ("1000", "0.07", "30.78", "1108.10"),
        ("1000.0", "0.070", "030.7800", "1108.1"),
    ],
)
def test_available_quote_rendering(requested, rate, monthly, total):
    quote = AvailableQuote(
        requested_amount=Decimal(requested),
        annual_rate=Decimal(rate),
        monthly_repayment=Decimal(monthly),
        total_repayment=Decimal(total),
    )

    assert QuoteFormatter().format(quote) == EXPECTED


def test_unavailable_quote_rendering():
    text = QuoteFormatter().format(UnavailableQuote(requested_amount=Decimal("15000")))

    assert text == "Lending for the specified amount is currently unavailable"
