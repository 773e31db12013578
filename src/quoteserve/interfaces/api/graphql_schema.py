"""GraphQL schema over the quote use cases."""

from dataclasses import dataclass

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from quoteserve.application.dto.quote_dto import ScoredQuote, SmartQuoteOutput
from quoteserve.application.use_cases.quote.get_quote import GetQuoteUseCase
from quoteserve.application.use_cases.quote.get_quote_stats import GetQuoteStatsUseCase
from quoteserve.application.use_cases.quote.get_random_quote import GetRandomQuoteUseCase
from quoteserve.application.use_cases.quote.get_smart_quote import GetSmartQuoteUseCase
from quoteserve.application.use_cases.quote.like_quote import LikeQuoteUseCase
from quoteserve.application.use_cases.quote.list_popular_quotes import (
    ListPopularQuotesUseCase,
)
from quoteserve.application.use_cases.search.find_similar_quotes import (
    FindSimilarQuotesUseCase,
)
from quoteserve.domain.entities import Quote
from quoteserve.domain.exceptions import NotFound, ValidationError
from quoteserve.interfaces.api.resources.search import parse_similar_request

MAX_POPULAR_LIMIT = 100


@dataclass
class GraphQLContext:
    """Use cases available to resolvers through info.context."""

    get_random_quote: GetRandomQuoteUseCase
    get_smart_quote: GetSmartQuoteUseCase
    get_quote: GetQuoteUseCase
    like_quote: LikeQuoteUseCase
    list_popular_quotes: ListPopularQuotesUseCase
    get_quote_stats: GetQuoteStatsUseCase
    find_similar_quotes: FindSimilarQuotesUseCase


def _not_found(e: NotFound) -> GraphQLError:
    return GraphQLError(f"Quote not found: {e.args[-1]}", extensions={"code": "NOT_FOUND"})


@strawberry.type(name="Quote")
class QuoteType:
    id: str
    content: str
    author: str
    tags: list[str]
    likes: int
    source: str
    created_at: str
    updated_at: str

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteType":
        return cls(
            id=quote.id,
            content=quote.content,
            author=quote.author,
            tags=list(quote.tags),
            likes=quote.likes,
            source=quote.source,
            created_at=quote.created_at.isoformat(),
            updated_at=quote.updated_at.isoformat(),
        )


@strawberry.type(name="SmartQuote")
class SmartQuoteType:
    quote: QuoteType
    is_new: bool
    total_quotes: int | None = None
    average_likes: float | None = None
    popularity: str | None = None

    @classmethod
    def from_output(cls, result: SmartQuoteOutput) -> "SmartQuoteType":
        return cls(
            quote=QuoteType.from_quote(result.quote),
            is_new=result.is_new,
            total_quotes=result.total_quotes,
            average_likes=result.average_likes,
            popularity=result.popularity.value if result.popularity else None,
        )


@strawberry.type(name="ScoredQuote")
class ScoredQuoteType:
    quote: QuoteType
    similarity: float

    @classmethod
    def from_scored(cls, scored: ScoredQuote) -> "ScoredQuoteType":
        return cls(quote=QuoteType.from_quote(scored.quote), similarity=round(scored.similarity, 6))


@strawberry.type(name="Stats")
class StatsType:
    total_quotes: int
    total_liked_quotes: int
    average_likes: float


@strawberry.type
class LikeResult:
    success: bool
    likes: int


@strawberry.type
class Query:
    @strawberry.field(description="Stored quote by id.")
    async def quote(self, info: Info, id: str) -> QuoteType:
        try:
            quote = await info.context.get_quote.execute(id)
        except NotFound as e:
            raise _not_found(e) from e
        return QuoteType.from_quote(quote)

    @strawberry.field(description="Fresh quote from the providers, stored before returning.")
    async def random_quote(self, info: Info) -> QuoteType:
        return QuoteType.from_quote(await info.context.get_random_quote.execute())

    @strawberry.field(description="Stored quote, weighted by likes when preferLiked is set.")
    async def smart_quote(self, info: Info, prefer_liked: bool = False) -> QuoteType:
        result = await info.context.get_smart_quote.execute(prefer_liked=prefer_liked)
        return QuoteType.from_quote(result.quote)

    @strawberry.field(description="Smart quote together with store statistics.")
    async def smart_quote_with_stats(
        self, info: Info, prefer_liked: bool = False
    ) -> SmartQuoteType:
        result = await info.context.get_smart_quote.execute(
            prefer_liked=prefer_liked, include_stats=True
        )
        return SmartQuoteType.from_output(result)

    @strawberry.field(description="Most-liked quotes.")
    async def popular_quotes(self, info: Info, limit: int = 10) -> list[QuoteType]:
        limit = min(max(limit, 1), MAX_POPULAR_LIMIT)
        quotes = await info.context.list_popular_quotes.execute(limit)
        return [QuoteType.from_quote(q) for q in quotes]

    @strawberry.field
    async def stats(self, info: Info) -> StatsType:
        stats = await info.context.get_quote_stats.execute()
        return StatsType(
            total_quotes=stats.total_quotes,
            total_liked_quotes=stats.total_liked_quotes,
            average_likes=stats.average_likes,
        )

    @strawberry.field(description="Provider quotes lexically similar to content.")
    async def similar_quotes(
        self, info: Info, content: str, limit: int = 5
    ) -> list[ScoredQuoteType]:
        try:
            input_data = parse_similar_request({"content": content, "limit": limit})
        except ValidationError as e:
            raise GraphQLError(str(e), extensions={"code": "BAD_USER_INPUT"}) from e
        results = await info.context.find_similar_quotes.execute(input_data)
        return [ScoredQuoteType.from_scored(r) for r in results]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Add one like to a stored quote.")
    async def like_quote(self, info: Info, id: str) -> LikeResult:
        try:
            likes = await info.context.like_quote.execute(id)
        except NotFound as e:
            raise _not_found(e) from e
        return LikeResult(success=True, likes=likes)


schema = strawberry.Schema(query=Query, mutation=Mutation)
