"""Random quote use case - fetch from providers and persist."""

from quoteserve.application.ports import QuoteProvider
from quoteserve.domain.entities import Quote


class GetRandomQuoteUseCase:
    """Fetch a fresh quote from the provider chain and store it."""

    def __init__(self, unit_of_work_factory: type, quote_provider: QuoteProvider) -> None:
        self._uow_factory = unit_of_work_factory
        self._quote_provider = quote_provider

    async def execute(self) -> Quote:
        quote = await self._quote_provider.fetch_random_quote()
        async with self._uow_factory() as uow:
            await uow.quotes.save(quote)
        return quote
