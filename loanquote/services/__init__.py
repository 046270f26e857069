from .allocator import allocate
from .amortization import blend_rate, repayments
from .calculator import LoanCalculator, quote_loan
from .data_loader import MarketFileError, MarketReader
from .formatter import QuoteFormatter
from .offer_book import build_offer_book

__all__ = [
    "LoanCalculator",
    "MarketFileError",
    "MarketReader",
    "QuoteFormatter",
    "allocate",
    "blend_rate",
    "build_offer_book",
    "quote_loan",
    "repayments",
]
