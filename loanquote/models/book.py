from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from types import MappingProxyType
from typing import Mapping

from loanquote.core.money import MONEY_CONTEXT, ZERO


@dataclass(frozen=True)
class Tier:
    rate: Decimal
    amount: Decimal


@dataclass(frozen=True)
class OfferBook:
    """Market snapshot: one tier per distinct rate, cheapest first."""

    tiers: tuple[Tier, ...] = ()
    total_supply: Decimal = ZERO

    def __post_init__(self) -> None:
        rates = [tier.rate for tier in self.tiers]
        if rates != sorted(rates) or len(set(rates)) != len(rates):
            raise ValueError("offer book tiers must have unique rates in ascending order")
        with localcontext(MONEY_CONTEXT):
            supply = sum((tier.amount for tier in self.tiers), ZERO)
        if supply != self.total_supply:
            raise ValueError("offer book total supply must equal the sum of its tiers")

    @property
    def capacities(self) -> Mapping[Decimal, Decimal]:
        return MappingProxyType({tier.rate: tier.amount for tier in self.tiers})

    def __len__(self) -> int:
        return len(self.tiers)


@dataclass(frozen=True)
class Allocation:
    """Principal drawn from each tier of an OfferBook for one request."""

    requested_amount: Decimal
    tiers: Mapping[Decimal, Decimal]

    @property
    def principal(self) -> Decimal:
        with localcontext(MONEY_CONTEXT):
            return sum(self.tiers.values(), ZERO)


@dataclass(frozen=True)
class InsufficientSupply:
    requested_amount: Decimal
    total_supply: Decimal
