"""quotable.io quote provider."""

from datetime import UTC, datetime

import httpx
from pydantic import ValidationError

from quoteserve.domain.entities import Quote
from quoteserve.domain.exceptions import FetchFailure
from quoteserve.domain.value_objects import QuoteSource
from quoteserve.infrastructure.quote_providers.http import get_json
from quoteserve.infrastructure.quote_providers.schemas import QuotablePage, QuotableQuote


def _to_quote(item: QuotableQuote) -> Quote:
    now = datetime.now(UTC)
    return Quote(
        id=item.id,
        content=item.content,
        author=item.author,
        tags=list(item.tags or []),
        likes=0,
        source=QuoteSource.QUOTABLE.value,
        created_at=now,
        updated_at=now,
    )


class QuotableProvider:
    """Fetches quotes from the quotable.io API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def fetch_random_quote(self) -> Quote:
        """GET /random."""
        data = await get_json(
            f"{self._base_url}/random", timeout=self._timeout, transport=self._transport
        )
        try:
            return _to_quote(QuotableQuote.model_validate(data))
        except ValidationError as e:
            raise FetchFailure(f"Unexpected quotable.io payload: {e}") from e

    async def fetch_candidate_batch(self, limit: int) -> list[Quote]:
        """GET /quotes?limit=N."""
        data = await get_json(
            f"{self._base_url}/quotes",
            timeout=self._timeout,
            params={"limit": limit},
            transport=self._transport,
        )
        try:
            page = QuotablePage.model_validate(data)
        except ValidationError as e:
            raise FetchFailure(f"Unexpected quotable.io payload: {e}") from e
        return [_to_quote(item) for item in page.results]
