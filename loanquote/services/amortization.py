from __future__ import annotations

from decimal import Decimal, localcontext

from loanquote.core.money import (
    MONEY_CONTEXT,
    MONTHS_IN_YEAR,
    REPAYMENT_TERM_MONTHS,
    ZERO,
    to_currency,
    to_rate,
)
from loanquote.models import Allocation


def blend_rate(allocation: Allocation) -> Decimal:
    """Amount-weighted average annual rate of an allocation, at rate scale."""

    if allocation.requested_amount == ZERO:
        return to_rate(ZERO)
    with localcontext(MONEY_CONTEXT):
        weighted_sum = sum((rate * amount for rate, amount in allocation.tiers.items()), ZERO)
        return to_rate(weighted_sum / allocation.requested_amount)


def repayments(
    allocation: Allocation, term_months: int = REPAYMENT_TERM_MONTHS
) -> tuple[Decimal, Decimal]:
    """Return ``(monthly_repayment, total_repayment)`` for an allocation.

    Every tier is amortized on its own and rounded to the cent before the
    tiers are added up, so the monthly figure is a sum of payable amounts.
    """

    if term_months <= 0:
        raise ValueError("term_months must be positive")
    with localcontext(MONEY_CONTEXT):
        monthly = sum(
            (
                tier_payment(principal, rate / MONTHS_IN_YEAR, term_months)
                for rate, principal in allocation.tiers.items()
            ),
            ZERO,
        )
        monthly = to_currency(monthly)
        total = to_currency(monthly * term_months)
    return monthly, total


def tier_payment(principal: Decimal, monthly_rate: Decimal, term_months: int) -> Decimal:
    with localcontext(MONEY_CONTEXT):
        if monthly_rate == ZERO:
            return to_currency(principal / term_months)
        factor = (Decimal("1") + monthly_rate) ** term_months
        payment = monthly_rate * principal * factor / (factor - Decimal("1"))
        return to_currency(payment)
