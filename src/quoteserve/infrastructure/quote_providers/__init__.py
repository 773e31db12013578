"""External quote providers."""

from quoteserve.infrastructure.quote_providers.dummyjson_provider import DummyJsonProvider
from quoteserve.infrastructure.quote_providers.fallback_provider import (
    FALLBACK_QUOTE_ID,
    FallbackQuoteProvider,
)
from quoteserve.infrastructure.quote_providers.quotable_provider import QuotableProvider

__all__ = [
    "DummyJsonProvider",
    "FALLBACK_QUOTE_ID",
    "FallbackQuoteProvider",
    "QuotableProvider",
]
