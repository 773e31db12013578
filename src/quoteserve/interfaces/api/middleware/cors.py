"""CORS middleware - adds Access-Control-Allow-Origin headers."""

import falcon.asgi

ALLOWED_METHODS = "GET, POST, OPTIONS"


class CORSMiddleware:
    """Middleware that adds CORS headers and answers OPTIONS preflight.

    An origin list containing "*" allows any origin.
    """

    def __init__(self, origins: list[str]) -> None:
        self._allow_any = "*" in origins
        self._origins = [o for o in origins if o != "*"]

    def _allowed_origin(self, origin: str | None) -> str | None:
        if self._allow_any:
            return "*"
        if origin and origin in self._origins:
            return origin
        return self._origins[0] if self._origins else None

    def _set_cors_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        allowed = self._allowed_origin(req.get_header("Origin"))
        if allowed:
            resp.set_header("Access-Control-Allow-Origin", allowed)
        resp.set_header("Access-Control-Allow-Methods", ALLOWED_METHODS)
        resp.set_header("Access-Control-Allow-Headers", "Content-Type")
        resp.set_header("Access-Control-Max-Age", "86400")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Handle OPTIONS preflight; add CORS headers to all responses."""
        self._set_cors_headers(req, resp)
        if req.method == "OPTIONS":
            resp.status = falcon.HTTP_200
            resp.media = {}
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        """Ensure CORS headers on error responses too."""
        self._set_cors_headers(req, resp)
