#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from bonfire.graphql import GraphQLClient, PostsSource
from bonfire.graphql.config import DEFAULT_ENDPOINT


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch a single page of posts")
    p.add_argument("first", nargs="?", type=int, default=10)
    p.add_argument("after", nargs="?", default=None, help="Cursor to start after")
    p.add_argument("--uri", default=DEFAULT_ENDPOINT)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with GraphQLClient.for_endpoint(args.uri) as client:
        page = await PostsSource(client).fetch_page(args.first, args.after)

    if page is None:
        print("No posts connection in response")
        return

    posts = page.nodes()
    print("=" * 65)
    print(f"Posts      : {len(posts)}")
    print(f"Next cursor: {page.next_cursor or '(none)'}")
    print("=" * 65)
    for post in posts:
        print(f"{post.id:30} | {post.title or '(no title)'}")
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
