#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from bonfire.graphql import (
    ClientConfig,
    GraphQLClient,
    LoggingObserver,
    authenticate,
    fetch_all_posts,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Walk the posts connection with retry and a page cap")
    p.add_argument("page_size", nargs="?", type=int, default=10)
    p.add_argument("max_pages", nargs="?", type=int, default=5)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    config = ClientConfig.from_env()

    client = GraphQLClient.for_endpoint(config.endpoint_uri, timeout=config.timeout)
    if config.credentials is not None:
        authed = await authenticate(
            client, config.credentials.email_or_username, config.credentials.password
        )
        await client.close()
        client = authed

    async with client:
        result = await fetch_all_posts(
            client, args.page_size, max_pages=args.max_pages, observer=LoggingObserver()
        )

    status = "partial" if result.partial else "complete"
    print(
        f"Fetched {result.total_items} posts over {result.pages_fetched} pages "
        f"({status}, {result.stop_reason.value})"
    )


if __name__ == "__main__":
    asyncio.run(main())
