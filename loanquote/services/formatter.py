from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from loanquote.models import AvailableQuote, LoanQuote

UNAVAILABLE_MESSAGE = "Lending for the specified amount is currently unavailable"


class QuoteFormatter:
    def __init__(self) -> None:
        templates_path = Path(__file__).resolve().parent.parent / "templates"
        self._jinja = Environment(
            loader=FileSystemLoader(templates_path),
            autoescape=False,
            undefined=StrictUndefined,
        )
        self._template = self._jinja.get_template("quote.txt")

    def format(self, quote: LoanQuote) -> str:
        if not isinstance(quote, AvailableQuote):
            return UNAVAILABLE_MESSAGE
        return self._template.render(
            requested_amount=f"{quote.requested_amount:.0f}",
            rate=f"{quote.annual_rate * 100:.1f}",
            monthly_repayment=f"{quote.monthly_repayment:.2f}",
            total_repayment=f"{quote.total_repayment:.2f}",
        )
