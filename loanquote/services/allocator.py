from __future__ import annotations

from decimal import Decimal, localcontext
from types import MappingProxyType

from loanquote.core.money import MONEY_CONTEXT, ZERO
from loanquote.models import Allocation, InsufficientSupply, OfferBook


def allocate(book: OfferBook, requested_amount: Decimal) -> Allocation | InsufficientSupply:
    """Fill the request from the cheapest tiers first.

    Taking all of a cheaper tier before touching a dearer one gives the lowest
    weighted rate achievable for the requested principal: moving any amount
    from a cheaper tier with spare capacity to a dearer tier only increases
    ``sum(rate * amount)``.
    """

    if requested_amount < ZERO:
        raise ValueError(f"requested amount must be non-negative, got {requested_amount}")
    if requested_amount > book.total_supply:
        return InsufficientSupply(requested_amount=requested_amount, total_supply=book.total_supply)

    drawn: dict[Decimal, Decimal] = {}
    need = requested_amount
    with localcontext(MONEY_CONTEXT):
        for tier in book.tiers:
            if need == ZERO:
                break
            take = min(tier.amount, need)
            drawn[tier.rate] = take
            need -= take

    return Allocation(requested_amount=requested_amount, tiers=MappingProxyType(drawn))
