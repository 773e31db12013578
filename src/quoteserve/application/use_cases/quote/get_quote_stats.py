"""Quote stats use case."""

from quoteserve.application.dto.quote_dto import QuoteStatsOutput
from quoteserve.application.use_cases.quote.get_smart_quote import average_top_likes


class GetQuoteStatsUseCase:
    """Store size and the average likes of the most-liked quotes."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> QuoteStatsOutput:
        async with self._uow_factory() as uow:
            total = await uow.quotes.count()
            liked, average = await average_top_likes(uow)
        return QuoteStatsOutput(
            total_quotes=total,
            total_liked_quotes=liked,
            average_likes=average,
        )
