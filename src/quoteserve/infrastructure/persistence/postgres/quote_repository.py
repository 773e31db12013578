"""PostgreSQL quote repository implementation."""

import json
from collections.abc import Sequence

from psycopg import AsyncConnection

from quoteserve.domain.entities import Quote

_COLUMNS = "id, content, author, tags, likes, source, created_at, updated_at"


def _encode_tags(tags: Sequence[str]) -> str:
    """Tags are stored as a JSON array in a text column."""
    return json.dumps(list(tags))


def _decode_tags(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [str(t) for t in json.loads(raw)]


def _row_to_quote(r: Sequence[object]) -> Quote:
    return Quote(
        id=r[0],
        content=r[1],
        author=r[2],
        tags=_decode_tags(r[3]),
        likes=r[4],
        source=r[5],
        created_at=r[6],
        updated_at=r[7],
    )


class PostgresQuoteRepository:
    """Quote repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def save(self, quote: Quote) -> Quote:
        """Insert or fully replace the quote with the same id."""
        await self._conn.execute(
            f"INSERT INTO quote ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (id) DO UPDATE SET "
            "content = EXCLUDED.content, author = EXCLUDED.author, tags = EXCLUDED.tags, "
            "likes = EXCLUDED.likes, source = EXCLUDED.source, "
            "created_at = EXCLUDED.created_at, updated_at = EXCLUDED.updated_at",
            (
                quote.id,
                quote.content,
                quote.author,
                _encode_tags(quote.tags),
                quote.likes,
                quote.source,
                quote.created_at,
                quote.updated_at,
            ),
        )
        return quote

    async def get_by_id(self, quote_id: str) -> Quote | None:
        """Get quote by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM quote WHERE id = %s", (quote_id,)
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_quote(r)

    async def increment_likes(self, quote_id: str) -> int | None:
        """Atomically add one like. Returns the new count, or None for an unknown id."""
        cur = await self._conn.execute(
            "UPDATE quote SET likes = likes + 1, updated_at = NOW() "
            "WHERE id = %s RETURNING likes",
            (quote_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return r[0]

    async def list_most_liked(self, limit: int = 10) -> list[Quote]:
        """Quotes by likes descending; ties by newest created_at, then id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM quote "
            "ORDER BY likes DESC, created_at DESC, id LIMIT %s",
            (limit,),
        )
        rows = await cur.fetchall()
        return [_row_to_quote(r) for r in rows]

    async def list_popularity(self) -> list[tuple[str, int]]:
        """(id, likes) for every stored quote."""
        cur = await self._conn.execute("SELECT id, likes FROM quote")
        rows = await cur.fetchall()
        return [(r[0], r[1]) for r in rows]

    async def count(self) -> int:
        """Total number of stored quotes."""
        cur = await self._conn.execute("SELECT COUNT(*) FROM quote")
        r = await cur.fetchone()
        return r[0] if r else 0
