"""dummyjson.com quote provider."""

import random
from datetime import UTC, datetime

import httpx
from pydantic import ValidationError

from quoteserve.domain.entities import Quote
from quoteserve.domain.exceptions import FetchFailure
from quoteserve.domain.value_objects import QuoteSource
from quoteserve.infrastructure.quote_providers.http import get_json
from quoteserve.infrastructure.quote_providers.schemas import DummyJsonPage, DummyJsonQuote

# dummyjson.com serves quote ids 1..MAX_QUOTE_ID
MAX_QUOTE_ID = 100


def _to_quote(item: DummyJsonQuote) -> Quote:
    now = datetime.now(UTC)
    return Quote(
        id=str(item.id),
        content=item.quote,
        author=item.author,
        tags=[],
        likes=0,
        source=QuoteSource.DUMMYJSON.value,
        created_at=now,
        updated_at=now,
    )


class DummyJsonProvider:
    """Fetches quotes from the dummyjson.com API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._rng = rng or random.Random()

    async def fetch_random_quote(self) -> Quote:
        """GET /{n} for a random n."""
        quote_id = self._rng.randint(1, MAX_QUOTE_ID)
        data = await get_json(
            f"{self._base_url}/{quote_id}", timeout=self._timeout, transport=self._transport
        )
        try:
            return _to_quote(DummyJsonQuote.model_validate(data))
        except ValidationError as e:
            raise FetchFailure(f"Unexpected dummyjson.com payload: {e}") from e

    async def fetch_candidate_batch(self, limit: int) -> list[Quote]:
        """GET ?limit=N."""
        data = await get_json(
            self._base_url,
            timeout=self._timeout,
            params={"limit": limit},
            transport=self._transport,
        )
        try:
            page = DummyJsonPage.model_validate(data)
        except ValidationError as e:
            raise FetchFailure(f"Unexpected dummyjson.com payload: {e}") from e
        return [_to_quote(item) for item in page.quotes]
