"""Application ports - interfaces for external adapters."""

from quoteserve.application.ports.quote_provider import QuoteProvider
from quoteserve.application.ports.quote_sampler import QuoteSampler
from quoteserve.application.ports.similarity_scorer import SimilarityScorer
from quoteserve.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "QuoteProvider",
    "QuoteSampler",
    "SimilarityScorer",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
