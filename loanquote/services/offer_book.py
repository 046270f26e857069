from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Iterable

from loanquote.core.money import MONEY_CONTEXT, ZERO
from loanquote.models import Offer, OfferBook, Tier


def build_offer_book(offers: Iterable[Offer]) -> OfferBook:
    """Merge offers sharing a rate and order the resulting tiers by rate.

    Rates are compared numerically, so ``0.07`` and ``0.070`` land in the same
    tier. Lender identity is dropped here; nothing downstream depends on it.
    """

    merged: dict[Decimal, Decimal] = {}
    with localcontext(MONEY_CONTEXT):
        for offer in offers:
            merged[offer.rate] = merged.get(offer.rate, ZERO) + offer.amount
        tiers = tuple(Tier(rate=rate, amount=amount) for rate, amount in sorted(merged.items()))
        total_supply = sum((tier.amount for tier in tiers), ZERO)
    return OfferBook(tiers=tiers, total_supply=total_supply)
