#!/usr/bin/env python3
"""Benchmark quote endpoints: latency (p50, p95, p99) and QPS under concurrent load.

Usage:
  export API_URL=http://localhost:8000
  uv run python scripts/bench_quotes.py [--seed 20] [--num-requests 200] \\
      [--concurrency 10] [--endpoint smart|liked|similar]

Seeding calls /v1/quotes/random (external providers) and likes the first quarter
of the stored quotes, the i-th one i+1 times, so weighted sampling has a skew.
"""
from __future__ import annotations

import argparse
import asyncio
import math
import os
import sys
import time

import httpx

SIMILAR_QUERY = "The only way to do great work is to love what you do"


def percentile(sorted_values: list[float], q: float) -> float:
    """Nearest-rank percentile of an ascending list."""
    rank = max(1, math.ceil(q / 100 * len(sorted_values)))
    return sorted_values[rank - 1]


async def seed(client: httpx.AsyncClient, count: int) -> list[str]:
    ids: list[str] = []
    for _ in range(count):
        r = await client.get("/v1/quotes/random")
        r.raise_for_status()
        ids.append(r.json()["id"])
    for i, quote_id in enumerate(ids[: max(1, len(ids) // 4)]):
        for _ in range(i + 1):
            (await client.post(f"/v1/quotes/{quote_id}/like")).raise_for_status()
    return ids


async def hit(client: httpx.AsyncClient, endpoint: str) -> httpx.Response:
    if endpoint == "smart":
        return await client.get(
            "/v1/quotes/smart", params={"prefer_liked": "true", "include_stats": "true"}
        )
    if endpoint == "liked":
        return await client.get("/v1/quotes/liked")
    return await client.post("/v1/quotes/similar", json={"content": SIMILAR_QUERY, "limit": 5})


async def run(args: argparse.Namespace, api_url: str) -> tuple[list[float], int, float]:
    """Fire num_requests requests, at most `concurrency` in flight."""
    latencies: list[float] = []
    errors = 0
    gate = asyncio.Semaphore(args.concurrency)

    async with httpx.AsyncClient(base_url=api_url, timeout=30.0) as client:
        print(f"Seeding {args.seed} quotes...")
        await seed(client, args.seed)

        async def one() -> None:
            nonlocal errors
            async with gate:
                t0 = time.perf_counter()
                try:
                    r = await hit(client, args.endpoint)
                except httpx.HTTPError:
                    errors += 1
                    return
                if r.status_code == 200:
                    latencies.append(time.perf_counter() - t0)
                else:
                    errors += 1

        print(
            f"Running {args.num_requests} {args.endpoint} requests "
            f"(concurrency={args.concurrency})..."
        )
        started = time.perf_counter()
        await asyncio.gather(*(one() for _ in range(args.num_requests)))
        return latencies, errors, time.perf_counter() - started


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark quote endpoints")
    parser.add_argument("--seed", type=int, default=20, help="Random quotes to store before the run")
    parser.add_argument("--num-requests", type=int, default=200, help="Number of benchmark requests")
    parser.add_argument("--concurrency", type=int, default=10, help="Requests in flight at once")
    parser.add_argument(
        "--endpoint", choices=("smart", "liked", "similar"), default="smart", help="Endpoint to hit"
    )
    parser.add_argument("--output", type=str, default="/results/bench_quotes.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    latencies, errors, elapsed = asyncio.run(run(args, api_url))

    if not latencies:
        print("No successful requests.")
        return 1

    latencies.sort()
    ms = [v * 1000 for v in latencies]
    summary = (
        f"{args.endpoint} benchmark (seeded={args.seed}, ok={len(ms)}, errors={errors}, "
        f"concurrency={args.concurrency})\n"
        f"  QPS: {len(ms) / elapsed:.2f}\n"
        f"  Latency: p50={percentile(ms, 50):.1f} ms, p95={percentile(ms, 95):.1f} ms, "
        f"p99={percentile(ms, 99):.1f} ms, max={ms[-1]:.1f} ms\n"
        f"  Total time: {elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
