"""GraphQL endpoint - executes the strawberry schema inside Falcon."""

import logging

import falcon.asgi
import strawberry
from graphql import GraphQLError

from quoteserve.interfaces.api.graphql_schema import GraphQLContext

logger = logging.getLogger(__name__)


def format_error(error: GraphQLError) -> dict:
    """Errors raised as GraphQLError pass through; anything else becomes opaque."""
    original = error.original_error
    if original is None or isinstance(original, GraphQLError):
        return error.formatted
    logger.error("GraphQL resolver failed at %s", error.path, exc_info=original)
    return {
        "message": "Internal server error",
        "path": error.path,
        "extensions": {"code": "INTERNAL_SERVER_ERROR"},
    }


class GraphQLResource:
    """POST /graphql - `{query, variables?, operationName?}` in, `{data, errors?}` out."""

    def __init__(self, schema: strawberry.Schema, context: GraphQLContext) -> None:
        self._schema = schema
        self._context = context

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
            resp.status = falcon.HTTP_400
            resp.media = {"errors": [{"message": "Invalid request body"}]}
            return

        query = body.get("query") if isinstance(body, dict) else None
        variables = body.get("variables") if isinstance(body, dict) else None
        if not isinstance(query, str) or not query.strip():
            resp.status = falcon.HTTP_400
            resp.media = {"errors": [{"message": "query is required"}]}
            return
        if variables is not None and not isinstance(variables, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"errors": [{"message": "variables must be an object"}]}
            return

        result = await self._schema.execute(
            query,
            variable_values=variables,
            operation_name=body.get("operationName"),
            context_value=self._context,
        )
        payload: dict = {"data": result.data}
        if result.errors:
            payload["errors"] = [format_error(e) for e in result.errors]
        resp.media = payload
        resp.status = falcon.HTTP_200
