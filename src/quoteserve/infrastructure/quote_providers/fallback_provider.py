"""Provider chain: primary, then secondary, then a fixed quote."""

import logging
from datetime import UTC, datetime

from quoteserve.application.ports import QuoteProvider
from quoteserve.domain.entities import Quote
from quoteserve.domain.exceptions import FetchFailure
from quoteserve.domain.value_objects import QuoteSource

logger = logging.getLogger(__name__)

FALLBACK_QUOTE_ID = "fallback-1"


def fallback_quote() -> Quote:
    """Static quote served when every provider fails."""
    now = datetime.now(UTC)
    return Quote(
        id=FALLBACK_QUOTE_ID,
        content="The only way to do great work is to love what you do.",
        author="Steve Jobs",
        tags=["motivation", "work"],
        likes=0,
        source=QuoteSource.FALLBACK.value,
        created_at=now,
        updated_at=now,
    )


class FallbackQuoteProvider:
    """Tries each provider once, in order. Random fetch never raises."""

    def __init__(self, primary: QuoteProvider, secondary: QuoteProvider) -> None:
        self._primary = primary
        self._secondary = secondary

    async def fetch_random_quote(self) -> Quote:
        """Primary, then secondary, then the static fallback quote."""
        try:
            return await self._primary.fetch_random_quote()
        except FetchFailure as e:
            logger.warning("Primary quote provider failed (%s), trying secondary", e)
        try:
            return await self._secondary.fetch_random_quote()
        except FetchFailure as e:
            logger.warning("Secondary quote provider failed (%s), using fallback quote", e)
        return fallback_quote()

    async def fetch_candidate_batch(self, limit: int) -> list[Quote]:
        """Primary, then secondary. Raises FetchFailure when both fail."""
        try:
            return await self._primary.fetch_candidate_batch(limit)
        except FetchFailure as e:
            logger.warning("Primary quote provider batch failed (%s), trying secondary", e)
        return await self._secondary.fetch_candidate_batch(limit)
