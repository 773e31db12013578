"""List most-liked quotes use case."""

from quoteserve.domain.entities import Quote


class ListPopularQuotesUseCase:
    """Stored quotes ordered by likes, most liked first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, limit: int = 10) -> list[Quote]:
        async with self._uow_factory() as uow:
            return await uow.quotes.list_most_liked(limit)
