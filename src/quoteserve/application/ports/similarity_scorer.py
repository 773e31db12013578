"""Similarity scorer port - lexical text similarity."""

from collections.abc import Sequence
from typing import Protocol

from quoteserve.application.dto.quote_dto import ScoredQuote
from quoteserve.domain.entities import Quote


class SimilarityScorer(Protocol):
    """Port for scoring and ranking candidate quotes against a query text."""

    def score(self, query: str, candidate: str) -> float: ...

    def rank(
        self,
        query: str,
        candidates: Sequence[Quote],
        limit: int,
        threshold: float = 0.2,
    ) -> list[ScoredQuote]: ...
