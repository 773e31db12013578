"""Quote sampler port - pick one quote id from the stored set."""

from collections.abc import Sequence
from typing import Protocol


class QuoteSampler(Protocol):
    """Port for choosing one candidate, uniformly or weighted by likes."""

    def pick(
        self, candidates: Sequence[tuple[str, int]], weighted: bool = False
    ) -> str | None: ...
