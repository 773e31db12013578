"""Get quote use case."""

from quoteserve.domain.entities import Quote
from quoteserve.domain.exceptions import NotFound


class GetQuoteUseCase:
    """Get stored quote by id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, quote_id: str) -> Quote:
        """Get quote by id."""
        async with self._uow_factory() as uow:
            quote = await uow.quotes.get_by_id(quote_id)
        if quote is None:
            raise NotFound("Quote", quote_id)
        return quote
