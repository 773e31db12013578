"""Like quote use case."""

import logging

from quoteserve.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class LikeQuoteUseCase:
    """Add one like to a stored quote.

    Likes are not deduplicated per caller; every call counts.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, quote_id: str) -> int:
        """Return the new like count. Raises NotFound for an unknown id."""
        async with self._uow_factory() as uow:
            likes = await uow.quotes.increment_likes(quote_id)
        if likes is None:
            raise NotFound("Quote", quote_id)
        logger.debug("Quote %s now has %d likes", quote_id, likes)
        return likes
