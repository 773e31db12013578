"""Quote store lifespan - the connection pool lives exactly as long as the ASGI app."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the pool at ASGI startup and closes it at shutdown.

    With wait=True startup blocks until min_size connections exist and fails
    after open_timeout seconds, so a missing database stops the server early.
    """

    def __init__(
        self,
        pool: AsyncConnectionPool,
        wait: bool = False,
        open_timeout: float = 30.0,
    ) -> None:
        self._pool = pool
        self._wait = wait
        self._open_timeout = open_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open(wait=self._wait, timeout=self._open_timeout)
        logger.info(
            "Quote store pool opened (min_size=%s, max_size=%s)",
            self._pool.min_size,
            self._pool.max_size,
        )

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Quote store pool closed")
