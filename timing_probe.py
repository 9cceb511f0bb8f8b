"""
timing_probe.py: async latency probe for Basic Auth failure paths

Fires requests with an unknown username and with a known username but wrong
password, then prints latency statistics per group. The two distributions
should be indistinguishable; a consistent gap hints at a timing side channel.

Usage:
  python timing_probe.py --base http://127.0.0.1:8000 --path /private/x \
      --user admin --count 2000 --concurrency 50
"""
import argparse
import asyncio
import json
import random
import statistics
import string
import time
from datetime import datetime, timezone

import httpx

from basic_gate.codec import encode_basic


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _rand(n=12):
    return "".join(random.choice(string.ascii_letters + string.digits) for _ in range(n))


async def _hit_one(client: httpx.AsyncClient, url: str, header: str, value: str):
    t0 = time.perf_counter()
    try:
        r = await client.get(url, headers={header: value}, timeout=10)
        status = r.status_code
    except httpx.HTTPError:
        status = None
    return status, (time.perf_counter() - t0) * 1000.0


def _summary(samples):
    if not samples:
        return {"count": 0}
    ordered = sorted(samples)
    return {
        "count": len(samples),
        "mean_ms": round(statistics.fmean(samples), 3),
        "median_ms": round(statistics.median(samples), 3),
        "p95_ms": round(ordered[int(0.95 * (len(ordered) - 1))], 3),
        "stdev_ms": round(statistics.pstdev(samples), 3),
    }


async def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--base", default="http://127.0.0.1:8000")
    ap.add_argument("--path", default="/private/probe")
    ap.add_argument("--header", default="Authorization")
    ap.add_argument("--user", default="admin", help="a username that exists in the store")
    ap.add_argument("--count", type=int, default=1000, help="requests per group")
    ap.add_argument("--concurrency", type=int, default=50)
    args = ap.parse_args()

    url = f"{args.base.rstrip('/')}{args.path}"
    jobs = (
        [("unknown_user", encode_basic(_rand(), _rand())) for _ in range(args.count)]
        + [("wrong_password", encode_basic(args.user, _rand())) for _ in range(args.count)]
    )
    random.shuffle(jobs)

    sem = asyncio.Semaphore(args.concurrency)
    results = {"unknown_user": [], "wrong_password": []}
    statuses = {}

    async with httpx.AsyncClient() as client:
        async def run(group, value):
            async with sem:
                status, ms = await _hit_one(client, url, args.header, value)
                statuses[status] = statuses.get(status, 0) + 1
                if status is not None:
                    results[group].append(ms)

        t0 = time.perf_counter()
        await asyncio.gather(*(run(g, v) for g, v in jobs))
        elapsed = time.perf_counter() - t0

    report = {
        "ts": _now_iso(),
        "url": url,
        "elapsed_s": round(elapsed, 3),
        "statuses": {str(k): v for k, v in statuses.items()},
        "unknown_user": _summary(results["unknown_user"]),
        "wrong_password": _summary(results["wrong_password"]),
    }
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    asyncio.run(main())
