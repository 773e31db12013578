"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from quoteserve import __version__
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
from quoteserve.config import get_settings
from quoteserve.infrastructure.persistence.postgres.connection import create_pool
from quoteserve.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from quoteserve.infrastructure.quote_providers import (
    DummyJsonProvider,
    FallbackQuoteProvider,
    QuotableProvider,
)
from quoteserve.infrastructure.sampling.weighted_sampler import WeightedSampler
from quoteserve.infrastructure.similarity.lexical_scorer import LexicalSimilarityScorer
from quoteserve.interfaces.api.graphql_schema import GraphQLContext, schema
from quoteserve.interfaces.api.middleware.cors import CORSMiddleware
from quoteserve.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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
from quoteserve.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log the failure and answer with an opaque 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_quoteserve_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.debug)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    quote_provider = FallbackQuoteProvider(
        primary=QuotableProvider(settings.quotable_url, timeout=settings.provider_timeout),
        secondary=DummyJsonProvider(settings.dummyjson_url, timeout=settings.provider_timeout),
    )
    sampler = WeightedSampler()
    scorer = LexicalSimilarityScorer()

    get_random_quote = GetRandomQuoteUseCase(
        unit_of_work_factory=uow_factory,
        quote_provider=quote_provider,
    )
    get_smart_quote = GetSmartQuoteUseCase(
        unit_of_work_factory=uow_factory,
        sampler=sampler,
        quote_provider=quote_provider,
    )
    get_quote = GetQuoteUseCase(unit_of_work_factory=uow_factory)
    like_quote = LikeQuoteUseCase(unit_of_work_factory=uow_factory)
    list_popular_quotes = ListPopularQuotesUseCase(unit_of_work_factory=uow_factory)
    get_quote_stats = GetQuoteStatsUseCase(unit_of_work_factory=uow_factory)
    find_similar_quotes = FindSimilarQuotesUseCase(
        quote_provider=quote_provider,
        scorer=scorer,
        candidate_limit=settings.similar_candidate_limit,
        threshold=settings.similarity_threshold,
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(
                pool,
                wait=settings.db_wait_on_startup,
                open_timeout=settings.db_open_timeout,
            ),
        ],
    )
    app.add_error_handler(Exception, handle_unexpected_error)

    health_resource = HealthResource(pool)
    smart_quote_resource = SmartQuoteResource(get_smart_quote)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/quotes/random", RandomQuoteResource(get_random_quote))
    app.add_route("/v1/quotes/smart", smart_quote_resource)
    app.add_route("/v1/quotes/recommended", smart_quote_resource, suffix="recommended")
    app.add_route("/v1/quotes/liked", PopularQuotesResource(list_popular_quotes))
    app.add_route("/v1/quotes/stats", QuoteStatsResource(get_quote_stats))
    app.add_route("/v1/quotes/similar", SimilarQuotesResource(find_similar_quotes))
    # Literal routes above win over {quote_id}; a quote whose id is one of
    # those words is still reachable through the GraphQL quote(id) field.
    app.add_route("/v1/quotes/{quote_id}", QuoteResource(get_quote))
    app.add_route("/v1/quotes/{quote_id}/like", QuoteLikeResource(like_quote))

    graphql_context = GraphQLContext(
        get_random_quote=get_random_quote,
        get_smart_quote=get_smart_quote,
        get_quote=get_quote,
        like_quote=like_quote,
        list_popular_quotes=list_popular_quotes,
        get_quote_stats=get_quote_stats,
        find_similar_quotes=find_similar_quotes,
    )
    app.add_route("/graphql", GraphQLResource(schema, graphql_context))

    logger.info("quoteserve v%s configured (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "quoteserve.main:create_quoteserve_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


def main() -> None:
    """CLI entry point."""
    print(f"quoteserve v{__version__}")
    run_server()
