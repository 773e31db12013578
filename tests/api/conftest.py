"""Fixtures for API tests."""

from unittest.mock import AsyncMock

import falcon.asgi
import pytest
from falcon.testing import TestClient

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
from quoteserve.interfaces.api.graphql_schema import GraphQLContext, schema
from quoteserve.interfaces.api.middleware.cors import CORSMiddleware
from quoteserve.interfaces.api.resources.graphql_endpoint import GraphQLResource
from quoteserve.interfaces.api.resources.health import HealthResource
from quoteserve.interfaces.api.resources.quotes import (
    PopularQuotesResource,
    QuoteLikeResource,
    QuoteResource,
    QuoteStatsResource,
    RandomQuoteResource,
    SmartQuoteResource,
)
from quoteserve.interfaces.api.resources.search import SimilarQuotesResource
from quoteserve.main import handle_unexpected_error


def build_app(uow_factory, quote_provider, sampler, scorer) -> falcon.asgi.App:
    """Falcon ASGI app wired like the production one, minus the database pool."""
    context = GraphQLContext(
        get_random_quote=GetRandomQuoteUseCase(
            unit_of_work_factory=uow_factory, quote_provider=quote_provider
        ),
        get_smart_quote=GetSmartQuoteUseCase(
            unit_of_work_factory=uow_factory,
            sampler=sampler,
            quote_provider=quote_provider,
        ),
        get_quote=GetQuoteUseCase(unit_of_work_factory=uow_factory),
        like_quote=LikeQuoteUseCase(unit_of_work_factory=uow_factory),
        list_popular_quotes=ListPopularQuotesUseCase(unit_of_work_factory=uow_factory),
        get_quote_stats=GetQuoteStatsUseCase(unit_of_work_factory=uow_factory),
        find_similar_quotes=FindSimilarQuotesUseCase(quote_provider=quote_provider, scorer=scorer),
    )
    smart = SmartQuoteResource(context.get_smart_quote)
    health = HealthResource()

    app = falcon.asgi.App(middleware=[CORSMiddleware(["http://localhost:3000"])])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/quotes/random", RandomQuoteResource(context.get_random_quote))
    app.add_route("/v1/quotes/smart", smart)
    app.add_route("/v1/quotes/recommended", smart, suffix="recommended")
    app.add_route("/v1/quotes/liked", PopularQuotesResource(context.list_popular_quotes))
    app.add_route("/v1/quotes/stats", QuoteStatsResource(context.get_quote_stats))
    app.add_route("/v1/quotes/similar", SimilarQuotesResource(context.find_similar_quotes))
    app.add_route("/v1/quotes/{quote_id}", QuoteResource(context.get_quote))
    app.add_route("/v1/quotes/{quote_id}/like", QuoteLikeResource(context.like_quote))
    app.add_route("/graphql", GraphQLResource(schema, context))
    return app


@pytest.fixture
def app(uow_factory, mock_quote_provider: AsyncMock, sampler, scorer) -> falcon.asgi.App:
    """Falcon ASGI app over the in-memory store."""
    return build_app(uow_factory, mock_quote_provider, sampler, scorer)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
