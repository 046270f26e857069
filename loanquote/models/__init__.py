from .book import Allocation, InsufficientSupply, OfferBook, Tier
from .offer import Offer, OfferValidationError
from .quote import AvailableQuote, LoanQuote, UnavailableQuote

__all__ = [
    "Allocation",
    "AvailableQuote",
    "InsufficientSupply",
    "LoanQuote",
    "Offer",
    "OfferBook",
    "OfferValidationError",
    "Tier",
    "UnavailableQuote",
]
