"""Quote DTOs."""

from dataclasses import dataclass

from quoteserve.domain.entities import Quote
from quoteserve.domain.value_objects import Popularity


@dataclass
class SmartQuoteOutput:
    """Smart quote with optional store statistics."""

    quote: Quote
    is_new: bool
    total_quotes: int | None = None
    average_likes: float | None = None
    popularity: Popularity | None = None


@dataclass
class QuoteStatsOutput:
    """Aggregate statistics over the stored quotes."""

    total_quotes: int
    total_liked_quotes: int
    average_likes: float


@dataclass
class ScoredQuote:
    """Quote paired with its similarity to a query text."""

    quote: Quote
    similarity: float


@dataclass
class SimilarQuotesInput:
    """Input for similar quotes search."""

    content: str
    limit: int = 5
