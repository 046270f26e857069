from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class AvailableQuote:
    requested_amount: Decimal
    annual_rate: Decimal
    monthly_repayment: Decimal
    total_repayment: Decimal

    @property
    def is_available(self) -> bool:
        return True


@dataclass(frozen=True)
class UnavailableQuote:
    """The market cannot supply the requested amount."""

    requested_amount: Decimal

    @property
    def is_available(self) -> bool:
        return False


LoanQuote = Union[AvailableQuote, UnavailableQuote]
