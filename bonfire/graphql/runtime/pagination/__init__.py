"""Cursor pagination with bounded retry.

Architecture:
    - definitions.py: PaginationPolicy, StopReason, FetchResult
    - executors.py: fetch_all loop and the fetch_all_posts entry point
    - telemetry.py: progress observers (structured logging)

Usage:
    Any coroutine returning Relay-style pages can be walked with fetch_all();
    fetch_all_posts() wires the ``posts`` connection to it.
"""

from __future__ import annotations

from .definitions import FetchResult, PaginationPolicy, StopReason
from .executors import Page, fetch_all, fetch_all_posts
from .telemetry import LoggingObserver, NullObserver, PaginationObserver

__all__ = [
    "PaginationPolicy",
    "StopReason",
    "FetchResult",
    "Page",
    "fetch_all",
    "fetch_all_posts",
    "PaginationObserver",
    "NullObserver",
    "LoggingObserver",
]
