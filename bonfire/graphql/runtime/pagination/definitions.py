"""Pagination policy and result structures.

This module defines the data structures used to describe how a cursor
connection is walked and what a walk produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class PaginationPolicy:
    """Bounds for walking a cursor connection.

    Attributes:
        max_pages: Hard cap on pages fetched (reaching it yields a partial result)
        max_retries_per_page: Retries after the first failed attempt on a page
        inter_page_delay_ms: Courtesy delay before every page after the first
        backoff_base_ms: First retry delay; doubles on each further retry
    """

    max_pages: int = 50
    max_retries_per_page: int = 3
    inter_page_delay_ms: int = 500
    backoff_base_ms: int = 1000

    def __post_init__(self) -> None:
        if self.max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        if self.max_retries_per_page < 0:
            raise ValueError("max_retries_per_page must be >= 0")
        if self.inter_page_delay_ms < 0:
            raise ValueError("inter_page_delay_ms must be >= 0")
        if self.backoff_base_ms < 0:
            raise ValueError("backoff_base_ms must be >= 0")

    def backoff_delay_ms(self, retry_count: int) -> int:
        """Delay before retry number ``retry_count + 1`` (1s, 2s, 4s, ...)."""
        return self.backoff_base_ms * 2**retry_count


class StopReason(Enum):
    """Why a pagination walk ended."""

    EXHAUSTED = "exhausted"
    CAP_REACHED = "cap_reached"
    RETRIES_EXHAUSTED = "retries_exhausted"
    DATA_SHAPE = "data_shape"


@dataclass
class FetchResult:
    """Outcome of walking a connection.

    Attributes:
        items: Accumulated nodes in page-then-edge order
        partial: True when the walk stopped before the connection was exhausted
        stop_reason: Why the walk ended
        pages_fetched: Number of pages fetched successfully
        requests_made: Number of page requests issued, retries included
        last_error: Message of the error that abandoned a page, if any
    """

    items: list[Any] = field(default_factory=list)
    partial: bool = False
    stop_reason: StopReason = StopReason.EXHAUSTED
    pages_fetched: int = 0
    requests_made: int = 0
    last_error: str | None = None

    @property
    def complete(self) -> bool:
        return not self.partial

    @property
    def total_items(self) -> int:
        return len(self.items)
