"""Quote provider port - external quote APIs."""

from typing import Protocol

from quoteserve.domain.entities import Quote


class QuoteProvider(Protocol):
    """Port for fetching quotes from outside the service."""

    async def fetch_random_quote(self) -> Quote: ...

    async def fetch_candidate_batch(self, limit: int) -> list[Quote]: ...
