"""Runtime components."""

from .pagination import (
    FetchResult,
    LoggingObserver,
    PaginationPolicy,
    StopReason,
    fetch_all,
    fetch_all_posts,
)

__all__ = [
    "FetchResult",
    "LoggingObserver",
    "PaginationPolicy",
    "StopReason",
    "fetch_all",
    "fetch_all_posts",
]
