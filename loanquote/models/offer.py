from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from loanquote.core.money import ZERO


class OfferValidationError(ValueError):
    """Raised when a lender offer carries values the market cannot accept."""


@dataclass(frozen=True)
class Offer:
    """A lender's annual rate and the amount they are willing to lend at it."""

    lender_name: str
    rate: Decimal
    amount: Decimal

    def __post_init__(self) -> None:
        if self.lender_name is None or not self.lender_name.strip():
            raise OfferValidationError("lender name must not be blank")
        if self.rate is None or self.rate < ZERO:
            raise OfferValidationError(f"offer from {self.lender_name} has negative rate: {self.rate}")
        if self.amount is None or self.amount < ZERO:
            raise OfferValidationError(f"offer from {self.lender_name} has negative amount: {self.amount}")
