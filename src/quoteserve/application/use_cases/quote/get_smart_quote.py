"""Smart quote use case - like-weighted pick with external fetch on an empty store."""

import logging

from quoteserve.application.dto.quote_dto import SmartQuoteOutput
from quoteserve.application.ports import QuoteProvider, QuoteSampler, UnitOfWork
from quoteserve.domain.entities import Quote
from quoteserve.domain.value_objects import Popularity

logger = logging.getLogger(__name__)

STATS_SAMPLE_SIZE = 10


async def pick_weighted_quote(
    uow: UnitOfWork, sampler: QuoteSampler, prefer_weighted: bool
) -> Quote | None:
    """Sample one stored quote; None only when the store is empty."""
    candidates = await uow.quotes.list_popularity()
    quote_id = sampler.pick(candidates, weighted=prefer_weighted)
    if quote_id is None:
        return None
    return await uow.quotes.get_by_id(quote_id)


async def average_top_likes(uow: UnitOfWork, limit: int = STATS_SAMPLE_SIZE) -> tuple[int, float]:
    """Size of the most-liked listing and its mean likes rounded to 2 places."""
    top = await uow.quotes.list_most_liked(limit)
    if not top:
        return 0, 0.0
    return len(top), round(sum(q.likes for q in top) / len(top), 2)


class GetSmartQuoteUseCase:
    """Always return a quote: sample the store, or fetch and persist one when it is empty."""

    def __init__(
        self,
        unit_of_work_factory: type,
        sampler: QuoteSampler,
        quote_provider: QuoteProvider,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._sampler = sampler
        self._quote_provider = quote_provider

    async def execute(
        self, prefer_liked: bool = False, include_stats: bool = False
    ) -> SmartQuoteOutput:
        """Pick a stored quote, weighted by likes when prefer_liked is set."""
        async with self._uow_factory() as uow:
            quote = await pick_weighted_quote(uow, self._sampler, prefer_liked)
            if quote is not None:
                if not include_stats:
                    return SmartQuoteOutput(quote=quote, is_new=False)
                total = await uow.quotes.count()
                _, average = await average_top_likes(uow)
                return SmartQuoteOutput(
                    quote=quote,
                    is_new=False,
                    total_quotes=total,
                    average_likes=average,
                    popularity=Popularity.classify(quote.likes, average),
                )

        logger.info("Quote store is empty, fetching a quote from providers")
        quote = await self._quote_provider.fetch_random_quote()
        async with self._uow_factory() as uow:
            await uow.quotes.save(quote)

        if not include_stats:
            return SmartQuoteOutput(quote=quote, is_new=True)
        return SmartQuoteOutput(quote=quote, is_new=True, total_quotes=1, average_likes=0.0)
