"""Fetch every post from a Bonfire GraphQL endpoint.

Usage:
    # Unauthenticated
    bonfire-posts

    # Authenticated (set both variables, or neither)
    BONFIRE_USERNAME=alice BONFIRE_PASSWORD=secret bonfire-posts --page-size 20

    # Larger sample, verbose logging
    bonfire-posts --limit-display 10 -v
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from .auth import login, token_preview
from .config import ENV_PASSWORD, ENV_URI, ENV_USERNAME, ClientConfig
from .core.exceptions import ConfigError, LoginError
from .io.client import GraphQLClient
from .models import Post
from .runtime.pagination import FetchResult, LoggingObserver, StopReason, fetch_all_posts

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2

_PREVIEW_CHARS = 100


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch all posts, paginating with retry")
    p.add_argument("--page-size", type=int, default=None, help="Posts per page")
    p.add_argument("--max-pages", type=int, default=None, help="Safety cap on pages fetched")
    p.add_argument(
        "--limit-display", type=int, default=5, help="Number of sample posts to print (0 = all)"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _truncate(text: str | None, placeholder: str) -> str:
    if not text:
        return placeholder
    if len(text) <= _PREVIEW_CHARS:
        return text
    return f"{text[:_PREVIEW_CHARS]}..."


def format_post(index: int, post: Post) -> str:
    content = post.post_content
    lines = [
        f"{index}. Post ID: {post.id}",
        f"   Title: {post.title or '(no title)'}",
        f"   Summary: {_truncate(content.summary if content else None, '(no summary)')}",
        f"   HTML Body: {_truncate(content.html_body if content else None, '(no htmlBody)')}",
    ]
    return "\n".join(lines)


def print_result(result: FetchResult, limit_display: int) -> None:
    if not result.items:
        print("No posts were fetched")
    else:
        print(f"Total posts: {result.total_items} ({result.pages_fetched} pages)")

    if result.stop_reason is StopReason.CAP_REACHED:
        print("Stopped early: page limit reached; results are partial")
    elif result.stop_reason is StopReason.RETRIES_EXHAUSTED:
        print(f"Stopped early after repeated failures: {result.last_error}")
    elif result.stop_reason is StopReason.DATA_SHAPE:
        print(f"Stopped early on an unexpected response: {result.last_error}")

    shown = result.items if limit_display <= 0 else result.items[:limit_display]
    for index, post in enumerate(shown, start=1):
        print()
        print(format_post(index, post))


def print_troubleshooting(authenticated: bool) -> None:
    print("\nTroubleshooting:", file=sys.stderr)
    if authenticated:
        steps = [
            f"Check {ENV_USERNAME} and {ENV_PASSWORD} are correct",
            f"Verify {ENV_URI} is reachable",
            "Ensure your account has permission to read posts",
        ]
    else:
        steps = [
            f"Verify {ENV_URI} is reachable",
            "Check whether the API requires authentication",
            f"If it does, set {ENV_USERNAME} and {ENV_PASSWORD}",
        ]
    for number, step in enumerate(steps, start=1):
        print(f"{number}. {step}", file=sys.stderr)


async def run(config: ClientConfig, *, limit_display: int = 5) -> FetchResult:
    """Optionally log in, then fetch all posts and print them.

    Raises:
        LoginError: If credentials are configured and login fails
    """
    credentials = config.credentials
    client = GraphQLClient.for_endpoint(config.endpoint_uri, timeout=config.timeout)
    try:
        if credentials is not None:
            print("Authentication mode: AUTHENTICATED")
            token = await login(client, credentials.email_or_username, credentials.password)
            print(f"Logged in, token: {token_preview(token)}")
            await client.close()
            client = client.with_bearer(token)
        else:
            print("Authentication mode: UNAUTHENTICATED")

        policy = config.pagination_policy()
        result = await fetch_all_posts(
            client,
            config.page_size,
            max_pages=policy.max_pages,
            max_retries_per_page=policy.max_retries_per_page,
            inter_page_delay_ms=policy.inter_page_delay_ms,
            observer=LoggingObserver("posts"),
        )
    finally:
        await client.close()

    print_result(result, limit_display)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ClientConfig.from_env()
        overrides = {
            key: value
            for key, value in (("page_size", args.page_size), ("max_pages", args.max_pages))
            if value is not None
        }
        if overrides:
            config = ClientConfig(**{**config.model_dump(), **overrides})
        authenticated = config.authenticated
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        print(f"Set {ENV_URI}; optionally set {ENV_USERNAME} and {ENV_PASSWORD}", file=sys.stderr)
        return EXIT_CONFIG
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    try:
        asyncio.run(run(config, limit_display=args.limit_display))
    except LoginError as e:
        print(f"Login failed: {e}", file=sys.stderr)
        print_troubleshooting(authenticated)
        return EXIT_FAILURE
    except Exception as e:
        logger.exception("fetch_posts_failed")
        print(f"Error: {e}", file=sys.stderr)
        print_troubleshooting(authenticated)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
