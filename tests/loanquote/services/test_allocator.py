from decimal import Decimal, localcontext
from itertools import product

import pytest

from loanquote.models import Allocation, InsufficientSupply, Offer
from loanquote.services import allocate, blend_rate, build_offer_book

SAMPLE_MARKET = [
    ("0.075", "640"),
    ("0.069", "480"),
    ("0.071", "520"),
    ("0.104", "170"),
    ("0.081", "320"),
    ("0.074", "140"),
    ("0.071", "60"),
]


def _book(offers):
    return build_offer_book(
        Offer(lender_name="Elizabeth", rate=Decimal(rate), amount=Decimal(amount)) for rate, amount in offers
    )


def _weighted_sum(tiers) -> Decimal:
    return sum((rate * amount for rate, amount in tiers.items()), Decimal("0"))


def test_cheapest_tiers_are_filled_first():
    allocation = allocate(_book(SAMPLE_MARKET), Decimal("1000"))

    assert isinstance(allocation, Allocation)
    assert dict(allocation.tiers) == {Decimal("0.069"): Decimal("480"), Decimal("0.071"): Decimal("520")}


@pytest.mark.parametrize("requested", ["1", "480", "481", "1140", "1999.99", "2330"])
def test_allocation_sums_to_request_within_capacity(requested):
    book = _book(SAMPLE_MARKET)

    allocation = allocate(book, Decimal(requested))

    assert isinstance(allocation, Allocation)
    assert allocation.principal == Decimal(requested)
    for rate, amount in allocation.tiers.items():
        assert Decimal("0") <= amount <= book.capacities[rate]


def test_request_above_supply_is_insufficient():
    result = allocate(_book([("0.05", "100")]), Decimal("101"))

    assert result == InsufficientSupply(requested_amount=Decimal("101"), total_supply=Decimal("100"))


def test_request_equal_to_supply_takes_everything():
    book = _book(SAMPLE_MARKET)

    allocation = allocate(book, book.total_supply)

    assert isinstance(allocation, Allocation)
    assert dict(allocation.tiers) == dict(book.capacities)


def test_zero_request_yields_empty_allocation():
    allocation = allocate(_book(SAMPLE_MARKET), Decimal("0"))

    assert isinstance(allocation, Allocation)
    assert dict(allocation.tiers) == {}
    assert blend_rate(allocation) == Decimal("0.000")


def test_zero_request_on_empty_market_is_satisfiable():
    allocation = allocate(_book([]), Decimal("0"))

    assert isinstance(allocation, Allocation)


def test_negative_request_is_rejected():
    with pytest.raises(ValueError):
        allocate(_book(SAMPLE_MARKET), Decimal("-1"))


@pytest.mark.parametrize(
    ("market", "requested"),
    [
        ([("0.10", "3"), ("0.05", "4"), ("0.20", "5")], "7"),
        ([("0.10", "3"), ("0.05", "4"), ("0.20", "5")], "10"),
        ([("0.03", "2"), ("0.03", "2"), ("0.01", "1"), ("0.09", "6")], "6"),
        ([("0", "5"), ("0.12", "5"), ("0.07", "2")], "8"),
    ],
)
def test_greedy_allocation_has_minimal_weighted_rate(market, requested):
    book = _book(market)
    target = Decimal(requested)

    allocation = allocate(book, target)
    assert isinstance(allocation, Allocation)

    rates = [tier.rate for tier in book.tiers]
    ranges = [range(int(tier.amount) + 1) for tier in book.tiers]
    feasible = [
        dict(zip(rates, (Decimal(amount) for amount in amounts)))
        for amounts in product(*ranges)
        if sum(amounts) == target
    ]

    assert feasible
    assert _weighted_sum(allocation.tiers) == min(_weighted_sum(candidate) for candidate in feasible)


def test_blended_rate_never_decreases_as_request_grows():
    book = _book(SAMPLE_MARKET)
    rates = []
    for requested in range(50, int(book.total_supply) + 1, 50):
        allocation = allocate(book, Decimal(requested))
        assert isinstance(allocation, Allocation)
        rates.append(blend_rate(allocation))

    assert rates == sorted(rates)


def test_allocation_does_not_depend_on_callers_decimal_precision():
    with localcontext() as ctx:
        ctx.prec = 5
        book = _book([("0.05", "4567.89"), ("0.06", "8000.01")])
        allocation = allocate(book, Decimal("10000.00"))

    assert book.total_supply == Decimal("12567.90")
    assert isinstance(allocation, Allocation)
    assert dict(allocation.tiers) == {Decimal("0.05"): Decimal("4567.89"), Decimal("0.06"): Decimal("5432.11")}
    assert allocation.principal == Decimal("10000.00")


def test_tiny_tiers_count_towards_supply():
    book = _book([("0.01", "1"), ("0.02", "1E-28")])
    requested = Decimal("1.0000000000000000000000000001")

    allocation = allocate(book, requested)

    assert book.total_supply == requested
    assert isinstance(allocation, Allocation)
    assert allocation.principal == requested
