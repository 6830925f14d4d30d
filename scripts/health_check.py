#!/usr/bin/env python3
"""Check that a deployed blog API is up and can reach its database.

Usage:
    python scripts/health_check.py [--url http://localhost:5000]

Prints the result as JSON. Exits 0 when healthy and 1 otherwise, so it can
serve as a container or cron healthcheck. The URL defaults to ``API_URL``.
"""

import argparse
import asyncio
import json
import os
import sys

import httpx

from blog.util.health_check import DEFAULT_TIMEOUT, HealthChecker


async def run(url: str, timeout: float) -> dict:
    async with httpx.AsyncClient(base_url=url, timeout=timeout) as client:
        return await HealthChecker(client).run_full_check()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--url", default=os.environ.get("API_URL", "http://localhost:5000")
    )
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    args = parser.parse_args()

    result = asyncio.run(run(args.url, args.timeout))
    print(json.dumps(result, indent=2))
    return 0 if result["overall"] == "healthy" else 1


if __name__ == "__main__":
    sys.exit(main())
