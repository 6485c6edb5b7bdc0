#!/usr/bin/env python3
"""Concurrent smoke check against a running ping server."""
import aiohttp
import argparse
import asyncio
import logging
import sys
from typing import List, Tuple

BASE_URL = "http://localhost:8123"
DEFAULT_COUNT = 100
EXPECTED_BODY = b"Hi there!\n"

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


async def fetch_ping(session: aiohttp.ClientSession, url: str) -> Tuple[int, bytes]:
    async with session.get(url) as response:
        return response.status, await response.read()


async def check_ping(base_url: str = BASE_URL, count: int = DEFAULT_COUNT) -> bool:
    """Fire `count` concurrent GET /ping requests and verify every response."""
    url = f"{base_url.rstrip('/')}/ping"
    logger.info(f"Sending {count} concurrent requests to {url}")

    async with aiohttp.ClientSession() as session:
        results: List[Tuple[int, bytes]] = await asyncio.gather(
            *(fetch_ping(session, url) for _ in range(count))
        )

    failures = [(status, body) for status, body in results
                if status != 200 or body != EXPECTED_BODY]
    if failures:
        status, body = failures[0]
        logger.error(f"{len(failures)}/{count} responses were wrong, first: {status} {body!r}")
        return False

    if len({body for _, body in results}) > 1:
        logger.error("Responses were not byte-identical")
        return False

    logger.info(f"All {count} responses returned 200 with the expected body")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Ping server smoke check")
    parser.add_argument("--url", default=BASE_URL, help="Server base URL")
    parser.add_argument("--count", "-c", type=int, default=DEFAULT_COUNT,
                        help="Number of concurrent requests")
    args = parser.parse_args()
    if args.count < 0:
        parser.error(f"--count must be zero or more, got {args.count}")

    try:
        success = asyncio.run(check_ping(args.url, args.count))
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        logger.warning("Smoke check interrupted by user")
        sys.exit(130)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error(f"Smoke check failed to reach server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
