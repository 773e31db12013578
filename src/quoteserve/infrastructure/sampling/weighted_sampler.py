"""Like-weighted random sampler."""

import random
from collections.abc import Sequence

DEFAULT_EXPONENT = 3


def popularity_weight(likes: int, exponent: int = DEFAULT_EXPONENT) -> int:
    """Weight (likes + 1) ** exponent; zero-like quotes keep weight 1."""
    return (max(likes, 0) + 1) ** exponent


class WeightedSampler:
    """Picks one (id, likes) candidate uniformly or biased toward higher likes.

    With the default cube exponent a quote with twice the likes of another is
    eight times as likely to be chosen.
    """

    def __init__(
        self, rng: random.Random | None = None, exponent: int = DEFAULT_EXPONENT
    ) -> None:
        self._rng = rng or random.Random()
        self._exponent = exponent

    def pick(
        self, candidates: Sequence[tuple[str, int]], weighted: bool = False
    ) -> str | None:
        """Return the chosen candidate id, or None when there are no candidates."""
        if not candidates:
            return None
        if not weighted:
            return self._rng.choice(candidates)[0]
        weights = [popularity_weight(likes, self._exponent) for _, likes in candidates]
        return self._rng.choices(candidates, weights=weights, k=1)[0][0]
