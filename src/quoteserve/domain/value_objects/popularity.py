"""Popularity label for a stored quote."""

from enum import StrEnum


class Popularity(StrEnum):
    """Popularity of a quote relative to the most-liked average."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def classify(cls, likes: int, average_likes: float) -> "Popularity":
        """High above the average, medium when liked at all, low otherwise."""
        if likes > average_likes:
            return cls.HIGH
        if likes > 0:
            return cls.MEDIUM
        return cls.LOW
