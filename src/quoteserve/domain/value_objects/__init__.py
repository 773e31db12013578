"""Domain value objects."""

from quoteserve.domain.value_objects.popularity import Popularity
from quoteserve.domain.value_objects.quote_source import QuoteSource

__all__ = [
    "Popularity",
    "QuoteSource",
]
