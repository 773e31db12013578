"""Similar quotes search API resource."""

import falcon.asgi

from quoteserve.application.dto.quote_dto import SimilarQuotesInput
from quoteserve.application.use_cases.search.find_similar_quotes import (
    FindSimilarQuotesUseCase,
)
from quoteserve.domain.exceptions import ValidationError
from quoteserve.interfaces.api.resources.quotes import quote_to_dict

MAX_SIMILAR_LIMIT = 20
DEFAULT_SIMILAR_LIMIT = 5


def parse_similar_request(body: object) -> SimilarQuotesInput:
    """Validate a similar-quotes request body. Raises ValidationError."""
    if not isinstance(body, dict):
        raise ValidationError("Invalid request body")

    content = body.get("content")
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("content is required and must be a non-empty string")

    limit = body.get("limit", DEFAULT_SIMILAR_LIMIT)
    # bool is an int subclass
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= MAX_SIMILAR_LIMIT:
        raise ValidationError(f"limit must be an integer between 1 and {MAX_SIMILAR_LIMIT}")

    return SimilarQuotesInput(content=content, limit=limit)


class SimilarQuotesResource:
    """POST /v1/quotes/similar - quotes lexically similar to the given text."""

    def __init__(self, find_similar_quotes: FindSimilarQuotesUseCase) -> None:
        self._find_similar_quotes = find_similar_quotes

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Execute similarity search."""
        try:
            body = await req.get_media()
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        try:
            input_data = parse_similar_request(body)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        results = await self._find_similar_quotes.execute(input_data)
        resp.media = {
            "quotes": [
                {**quote_to_dict(r.quote), "similarity": round(r.similarity, 6)}
                for r in results
            ],
            "total": len(results),
            "search_text": input_data.content,
        }
        resp.status = falcon.HTTP_200
