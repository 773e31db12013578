"""Domain entities."""

from quoteserve.domain.entities.quote import Quote

__all__ = [
    "Quote",
]
