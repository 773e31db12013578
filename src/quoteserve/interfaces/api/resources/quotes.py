"""Quote API resources."""

import falcon.asgi

from quoteserve.application.dto.quote_dto import SmartQuoteOutput
from quoteserve.application.use_cases.quote.get_quote import GetQuoteUseCase
from quoteserve.application.use_cases.quote.get_quote_stats import GetQuoteStatsUseCase
from quoteserve.application.use_cases.quote.get_random_quote import GetRandomQuoteUseCase
from quoteserve.application.use_cases.quote.get_smart_quote import GetSmartQuoteUseCase
from quoteserve.application.use_cases.quote.like_quote import LikeQuoteUseCase
from quoteserve.application.use_cases.quote.list_popular_quotes import (
    ListPopularQuotesUseCase,
)
from quoteserve.domain.entities import Quote
from quoteserve.domain.exceptions import NotFound


def quote_to_dict(quote: Quote) -> dict:
    """JSON representation of a quote."""
    return {
        "id": quote.id,
        "content": quote.content,
        "author": quote.author,
        "tags": list(quote.tags),
        "likes": quote.likes,
        "source": quote.source,
        "created_at": quote.created_at.isoformat(),
        "updated_at": quote.updated_at.isoformat(),
    }


def _smart_quote_to_dict(result: SmartQuoteOutput, include_stats: bool) -> dict:
    data = quote_to_dict(result.quote)
    if include_stats:
        data["is_new"] = result.is_new
        data["total_quotes"] = result.total_quotes
        data["average_likes"] = result.average_likes
        if result.popularity is not None:
            data["popularity"] = result.popularity.value
    return data


class RandomQuoteResource:
    """GET /v1/quotes/random - fetch a fresh quote and store it."""

    def __init__(self, get_random_quote: GetRandomQuoteUseCase) -> None:
        self._get_random_quote = get_random_quote

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        quote = await self._get_random_quote.execute()
        resp.media = quote_to_dict(quote)
        resp.status = falcon.HTTP_200


class SmartQuoteResource:
    """GET /v1/quotes/smart and /v1/quotes/recommended - sample the stored quotes."""

    def __init__(self, get_smart_quote: GetSmartQuoteUseCase) -> None:
        self._get_smart_quote = get_smart_quote

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Smart quote, optionally with store statistics."""
        prefer_liked = req.get_param_as_bool("prefer_liked", default=False)
        include_stats = req.get_param_as_bool("include_stats", default=False)
        result = await self._get_smart_quote.execute(
            prefer_liked=prefer_liked, include_stats=include_stats
        )
        resp.media = _smart_quote_to_dict(result, include_stats)
        resp.status = falcon.HTTP_200

    async def on_get_recommended(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Recommended quote - smart quote without statistics."""
        prefer_liked = req.get_param_as_bool("prefer_liked", default=False)
        result = await self._get_smart_quote.execute(prefer_liked=prefer_liked)
        resp.media = quote_to_dict(result.quote)
        resp.status = falcon.HTTP_200


class PopularQuotesResource:
    """GET /v1/quotes/liked - most-liked quotes."""

    def __init__(self, list_popular_quotes: ListPopularQuotesUseCase) -> None:
        self._list_popular_quotes = list_popular_quotes

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        limit = req.get_param_as_int("limit") or 10
        limit = min(max(limit, 1), 100)
        quotes = await self._list_popular_quotes.execute(limit)
        resp.media = {
            "quotes": [quote_to_dict(q) for q in quotes],
            "total": len(quotes),
        }
        resp.status = falcon.HTTP_200


class QuoteStatsResource:
    """GET /v1/quotes/stats - store statistics."""

    def __init__(self, get_quote_stats: GetQuoteStatsUseCase) -> None:
        self._get_quote_stats = get_quote_stats

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        stats = await self._get_quote_stats.execute()
        resp.media = {
            "total_quotes": stats.total_quotes,
            "total_liked_quotes": stats.total_liked_quotes,
            "average_likes": stats.average_likes,
        }
        resp.status = falcon.HTTP_200


class QuoteResource:
    """GET /v1/quotes/{quote_id} - get stored quote."""

    def __init__(self, get_quote: GetQuoteUseCase) -> None:
        self._get_quote = get_quote

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        quote_id: str,
    ) -> None:
        try:
            quote = await self._get_quote.execute(quote_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Quote not found"}
            return
        resp.media = quote_to_dict(quote)
        resp.status = falcon.HTTP_200


class QuoteLikeResource:
    """POST /v1/quotes/{quote_id}/like - add one like."""

    def __init__(self, like_quote: LikeQuoteUseCase) -> None:
        self._like_quote = like_quote

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        quote_id: str,
    ) -> None:
        try:
            likes = await self._like_quote.execute(quote_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Quote not found"}
            return
        resp.media = {"id": quote_id, "likes": likes}
        resp.status = falcon.HTTP_200
