"""Shared HTTP helper for quote providers."""

from typing import Any

import httpx

from quoteserve.domain.exceptions import FetchFailure


async def get_json(
    url: str,
    *,
    timeout: float,
    params: dict[str, Any] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """GET url and decode JSON. Any transport, status or decode error becomes FetchFailure."""
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            return response.json()
    except httpx.TimeoutException as e:
        raise FetchFailure(f"Request to {url} timed out after {timeout}s") from e
    except httpx.HTTPError as e:
        raise FetchFailure(f"Request to {url} failed: {e}") from e
    except ValueError as e:
        raise FetchFailure(f"Invalid JSON from {url}: {e}") from e
