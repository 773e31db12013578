"""Domain exceptions."""


class QuoteServeError(Exception):
    """Base exception for quoteserve."""

    pass


class NotFound(QuoteServeError):
    """Requested resource was not found."""

    pass


class StorageFailure(QuoteServeError):
    """Persistence layer failed (connection, disk, corruption)."""

    pass


class FetchFailure(QuoteServeError):
    """External quote provider did not return a usable payload."""

    pass


class ValidationError(QuoteServeError):
    """Validation failed for input data."""

    pass
