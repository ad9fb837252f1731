"""Cursor pagination with bounded retry.

This module walks a Relay-style connection page by page, accumulating
nodes, retrying failed pages with exponential backoff and stopping at a
page cap. Failures never escape fetch_all(): a page that keeps failing
ends the walk with a partial result instead. A response that does not
match the expected shape ends it at once, since retrying cannot fix it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from ...core.exceptions import DataShapeError
from ...io.client import RequestExecutor
from ...io.posts import PostsSource
from .definitions import FetchResult, PaginationPolicy, StopReason
from .telemetry import NullObserver, PaginationObserver


class Page(Protocol):
    """One page of a connection."""

    edges: list[Any] | None

    def nodes(self) -> list[Any]: ...

    @property
    def next_cursor(self) -> str | None: ...


FetchPage = Callable[[int, str | None], Awaitable[Page | None]]
Sleep = Callable[[float], Awaitable[Any]]


async def fetch_all(
    fetch_page: FetchPage,
    page_size: int,
    *,
    policy: PaginationPolicy | None = None,
    observer: PaginationObserver | None = None,
    sleep: Sleep = asyncio.sleep,
) -> FetchResult:
    """Walk a connection to completion.

    Args:
        fetch_page: Coroutine taking (page_size, cursor) and returning a page
            (or None when the connection is absent)
        page_size: Items requested per page
        policy: Page cap, retry and delay bounds (defaults to PaginationPolicy())
        observer: Receives progress events (defaults to a no-op observer)
        sleep: Coroutine used for every suspension, in seconds

    Returns:
        FetchResult with the accumulated items. ``partial`` is True when the
        page cap was reached, a page failed after all retries, or a page
        had an unexpected shape.

    Raises:
        ValueError: If page_size is not positive
    """
    if page_size < 1:
        raise ValueError("page_size must be >= 1")

    policy = policy or PaginationPolicy()
    observer = observer or NullObserver()
    result = FetchResult()

    cursor: str | None = None
    page_number = 1
    retry_count = 0

    while True:
        if page_number > 1 and retry_count == 0 and policy.inter_page_delay_ms > 0:
            await sleep(policy.inter_page_delay_ms / 1000.0)

        result.requests_made += 1
        try:
            page = await fetch_page(page_size, cursor)
        except DataShapeError as e:
            result.partial = True
            result.stop_reason = StopReason.DATA_SHAPE
            result.last_error = str(e)
            observer.on_page_abandoned(page_number, retry_count + 1, str(e), result.total_items)
            break
        except Exception as e:
            if retry_count < policy.max_retries_per_page:
                delay_ms = policy.backoff_delay_ms(retry_count)
                retry_count += 1
                observer.on_retry_scheduled(
                    page_number, retry_count, policy.max_retries_per_page, delay_ms, str(e)
                )
                await sleep(delay_ms / 1000.0)
                continue

            result.partial = True
            result.stop_reason = StopReason.RETRIES_EXHAUSTED
            result.last_error = str(e)
            observer.on_page_abandoned(page_number, retry_count + 1, str(e), result.total_items)
            break

        result.pages_fetched += 1
        new_items = page.nodes() if page is not None else []
        result.items.extend(new_items)
        observer.on_page_fetched(page_number, len(new_items), result.total_items)

        if page is None or not page.edges:
            break

        if page_number >= policy.max_pages:
            result.partial = True
            result.stop_reason = StopReason.CAP_REACHED
            observer.on_cap_reached(policy.max_pages, result.total_items)
            break

        next_cursor = page.next_cursor
        if next_cursor is None:
            break

        cursor = next_cursor
        page_number += 1
        retry_count = 0

    observer.on_complete(result)
    return result


async def fetch_all_posts(
    executor: RequestExecutor,
    page_size: int,
    max_pages: int = 50,
    max_retries_per_page: int = 3,
    inter_page_delay_ms: int = 500,
    *,
    observer: PaginationObserver | None = None,
    sleep: Sleep = asyncio.sleep,
) -> FetchResult:
    """Fetch every post reachable through the ``posts`` connection.

    Example:
        >>> async with GraphQLClient.for_endpoint(uri) as client:
        ...     result = await fetch_all_posts(client, page_size=10)
        ...     print(len(result.items), result.partial)
    """
    policy = PaginationPolicy(
        max_pages=max_pages,
        max_retries_per_page=max_retries_per_page,
        inter_page_delay_ms=inter_page_delay_ms,
    )
    source = PostsSource(executor)
    return await fetch_all(
        source.fetch_page, page_size, policy=policy, observer=observer, sleep=sleep
    )
