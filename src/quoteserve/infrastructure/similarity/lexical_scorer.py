"""Lexical similarity scorer - stemmed Jaccard overlap plus edit-distance ratio."""

from collections.abc import Sequence

from nltk.metrics.distance import edit_distance
from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

from quoteserve.application.dto.quote_dto import ScoredQuote
from quoteserve.domain.entities import Quote


def jaccard(tokens1: set[str], tokens2: set[str]) -> float:
    """Intersection over union; 0 when either set is empty."""
    if not tokens1 or not tokens2:
        return 0.0
    return len(tokens1 & tokens2) / len(tokens1 | tokens2)


def edit_similarity(text1: str, text2: str) -> float:
    """1 - Levenshtein distance / longer length; identical (including empty) strings give 1."""
    longest = max(len(text1), len(text2))
    if longest == 0:
        return 1.0
    return 1 - edit_distance(text1, text2) / longest


class LexicalSimilarityScorer:
    """Scores text similarity in [0, 1] as a weighted blend of two lexical metrics."""

    def __init__(self, jaccard_weight: float = 0.7, edit_weight: float = 0.3) -> None:
        self._jaccard_weight = jaccard_weight
        self._edit_weight = edit_weight
        self._tokenizer = RegexpTokenizer(r"\w+")
        self._stemmer = PorterStemmer()

    def tokenize(self, text: str) -> list[str]:
        """Lowercase word tokens reduced to their Porter stems."""
        return [self._stemmer.stem(token) for token in self._tokenizer.tokenize(text.lower())]

    def score(self, query: str, candidate: str) -> float:
        """Similarity between query and candidate."""
        query_lower = query.lower()
        candidate_lower = candidate.lower()
        overlap = jaccard(set(self.tokenize(query_lower)), set(self.tokenize(candidate_lower)))
        edit = edit_similarity(query_lower, candidate_lower)
        combined = overlap * self._jaccard_weight + edit * self._edit_weight
        return min(max(combined, 0.0), 1.0)

    def rank(
        self,
        query: str,
        candidates: Sequence[Quote],
        limit: int,
        threshold: float = 0.2,
    ) -> list[ScoredQuote]:
        """Sort by descending score, keep the top `limit`, then drop scores <= threshold.

        The result may hold fewer than `limit` quotes, or none.
        """
        scored = [ScoredQuote(quote=q, similarity=self.score(query, q.content)) for q in candidates]
        scored.sort(key=lambda s: s.similarity, reverse=True)
        return [s for s in scored[:limit] if s.similarity > threshold]
