"""Quote provenance tags."""

from enum import StrEnum


class QuoteSource(StrEnum):
    """Where a quote was obtained from."""

    QUOTABLE = "quotable.io"
    DUMMYJSON = "dummyjson.com"
    FALLBACK = "fallback"
