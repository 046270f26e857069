from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal

# 34 significant digits, same as IEEE 754 decimal128
MONEY_CONTEXT = Context(prec=34, rounding=ROUND_HALF_EVEN)

ZERO = Decimal("0")
CENT = Decimal("0.01")
RATE_STEP = Decimal("0.001")

MONTHS_IN_YEAR = 12
REPAYMENT_TERM_MONTHS = 36


def to_currency(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_EVEN)


def to_rate(value: Decimal) -> Decimal:
    return value.quantize(RATE_STEP, rounding=ROUND_HALF_EVEN)
