#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os
import sys

from bonfire.graphql import GraphQLClient, LoginError, login, token_preview
from bonfire.graphql.config import DEFAULT_ENDPOINT


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Log in and build an authenticated client")
    p.add_argument("--uri", default=os.environ.get("BONFIRE_GRAPHQL_URI") or DEFAULT_ENDPOINT)
    p.add_argument("--username", default=os.environ.get("BONFIRE_USERNAME"))
    p.add_argument("--password", default=os.environ.get("BONFIRE_PASSWORD"))
    return p.parse_args()


async def main() -> int:
    args = parse_args()
    if not args.username or not args.password:
        print("Set BONFIRE_USERNAME and BONFIRE_PASSWORD (or pass --username/--password)")
        return 2

    async with GraphQLClient.for_endpoint(args.uri) as client:
        try:
            token = await login(client, args.username, args.password)
        except LoginError as e:
            print(f"Login failed: {e}")
            return 1

    print(f"Login successful, token: {token_preview(token)}")
    async with GraphQLClient.for_endpoint(args.uri, token=token) as authed:
        print(f"Authenticated client ready: {authed.session.endpoint_uri}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
