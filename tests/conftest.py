"""Pytest fixtures for quoteserve tests."""

from __future__ import annotations

import random
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from quoteserve.domain.entities import Quote
from quoteserve.infrastructure.sampling.weighted_sampler import WeightedSampler
from quoteserve.infrastructure.similarity.lexical_scorer import LexicalSimilarityScorer

BASE_TIME = datetime(2026, 1, 1, tzinfo=UTC)


def make_quote(
    quote_id: str = "q1",
    *,
    content: str = "Stay hungry, stay foolish.",
    author: str = "Steve Jobs",
    tags: list[str] | None = None,
    likes: int = 0,
    source: str = "test",
    created_at: datetime | None = None,
    updated_at: datetime | None = None,
) -> Quote:
    """Build a Quote with test defaults."""
    created = created_at or BASE_TIME
    return Quote(
        id=quote_id,
        content=content,
        author=author,
        tags=list(tags or []),
        likes=likes,
        source=source,
        created_at=created,
        updated_at=updated_at or created,
    )


# --- Fake repositories ---


class FakeQuoteRepository:
    """In-memory quote repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Quote] = {}

    async def save(self, quote: Quote) -> Quote:
        self._by_id[quote.id] = replace(quote, tags=list(quote.tags))
        return quote

    async def get_by_id(self, quote_id: str) -> Quote | None:
        quote = self._by_id.get(quote_id)
        return replace(quote, tags=list(quote.tags)) if quote else None

    async def increment_likes(self, quote_id: str) -> int | None:
        quote = self._by_id.get(quote_id)
        if not quote:
            return None
        updated_at = max(datetime.now(UTC), quote.updated_at + timedelta(microseconds=1))
        self._by_id[quote_id] = replace(quote, likes=quote.likes + 1, updated_at=updated_at)
        return quote.likes + 1

    async def list_most_liked(self, limit: int = 10) -> list[Quote]:
        items = sorted(self._by_id.values(), key=lambda q: q.id)
        items.sort(key=lambda q: q.created_at, reverse=True)
        items.sort(key=lambda q: q.likes, reverse=True)
        return items[:limit]

    async def list_popularity(self) -> list[tuple[str, int]]:
        return [(q.id, q.likes) for q in self._by_id.values()]

    async def count(self) -> int:
        return len(self._by_id)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.quotes = FakeQuoteRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def sampler() -> WeightedSampler:
    """Sampler with a fixed seed."""
    return WeightedSampler(rng=random.Random(1234))


@pytest.fixture
def scorer() -> LexicalSimilarityScorer:
    return LexicalSimilarityScorer()


@pytest.fixture
def mock_quote_provider():
    """AsyncMock for QuoteProvider - returns a provider quote and an empty batch."""
    mock = AsyncMock()
    mock.fetch_random_quote.return_value = make_quote(
        "ext-1",
        content="Whatever you are, be a good one.",
        author="Abraham Lincoln",
        tags=["wisdom"],
        source="quotable.io",
    )
    mock.fetch_candidate_batch.return_value = []
    return mock
