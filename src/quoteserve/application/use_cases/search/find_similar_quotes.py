"""Similar quotes use case - lexical ranking over an external candidate batch."""

import logging

from quoteserve.application.dto.quote_dto import ScoredQuote, SimilarQuotesInput
from quoteserve.application.ports import QuoteProvider, SimilarityScorer

logger = logging.getLogger(__name__)


class FindSimilarQuotesUseCase:
    """Score a fixed-size provider batch against the query text.

    Fetch failures degrade to an empty result instead of propagating.
    """

    def __init__(
        self,
        quote_provider: QuoteProvider,
        scorer: SimilarityScorer,
        candidate_limit: int = 50,
        threshold: float = 0.2,
    ) -> None:
        self._quote_provider = quote_provider
        self._scorer = scorer
        self._candidate_limit = candidate_limit
        self._threshold = threshold

    async def execute(self, input_data: SimilarQuotesInput) -> list[ScoredQuote]:
        """Return up to input_data.limit quotes scoring above the threshold."""
        try:
            candidates = await self._quote_provider.fetch_candidate_batch(self._candidate_limit)
        except Exception as e:
            logger.warning("Failed to fetch similar quote candidates: %s", e)
            return []
        return self._scorer.rank(
            input_data.content,
            candidates,
            limit=input_data.limit,
            threshold=self._threshold,
        )
