from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class TierSchema(BaseModel):
    rate: Decimal
    amount: Decimal


class MarketResponse(BaseModel):
    total_supply: Decimal
    tiers: list[TierSchema]


class QuoteResponse(BaseModel):
    requested_amount: Decimal
    available: bool
    annual_rate: Optional[Decimal] = None
    monthly_repayment: Optional[Decimal] = None
    total_repayment: Optional[Decimal] = None
    summary: str
