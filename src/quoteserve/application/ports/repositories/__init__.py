"""Repository ports."""

from quoteserve.application.ports.repositories.quote_repository import (
    QuoteRepository,
)

__all__ = [
    "QuoteRepository",
]
