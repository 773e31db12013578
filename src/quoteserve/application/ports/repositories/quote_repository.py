"""Quote repository port."""

from typing import Protocol

from quoteserve.domain.entities import Quote


class QuoteRepository(Protocol):
    """Port for quote persistence."""

    async def save(self, quote: Quote) -> Quote: ...

    async def get_by_id(self, quote_id: str) -> Quote | None: ...

    async def increment_likes(self, quote_id: str) -> int | None: ...

    async def list_most_liked(self, limit: int = 10) -> list[Quote]: ...

    async def list_popularity(self) -> list[tuple[str, int]]: ...

    async def count(self) -> int: ...
