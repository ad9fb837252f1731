"""Progress observers for pagination.

The fetch loop reports progress through an observer instead of writing to
the console, so it can run silently in tests. LoggingObserver emits
structured log records for each event.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .definitions import FetchResult

logger = logging.getLogger(__name__)


class PaginationObserver(Protocol):
    """Receives progress events from the fetch loop."""

    def on_page_fetched(self, page_number: int, new_items: int, total_items: int) -> None: ...

    def on_retry_scheduled(
        self, page_number: int, attempt: int, max_retries: int, delay_ms: int, error: str
    ) -> None: ...

    def on_cap_reached(self, max_pages: int, total_items: int) -> None: ...

    def on_page_abandoned(
        self, page_number: int, attempts: int, error: str, total_items: int
    ) -> None: ...

    def on_complete(self, result: FetchResult) -> None: ...


class NullObserver:
    """Observer that ignores every event."""

    def on_page_fetched(self, page_number: int, new_items: int, total_items: int) -> None:
        pass

    def on_retry_scheduled(
        self, page_number: int, attempt: int, max_retries: int, delay_ms: int, error: str
    ) -> None:
        pass

    def on_cap_reached(self, max_pages: int, total_items: int) -> None:
        pass

    def on_page_abandoned(
        self, page_number: int, attempts: int, error: str, total_items: int
    ) -> None:
        pass

    def on_complete(self, result: FetchResult) -> None:
        pass


class LoggingObserver:
    """Observer that emits structured log records.

    Args:
        connection: Name of the connection being walked, attached to every record
        log: Logger to write to (defaults to this module's logger)
    """

    def __init__(self, connection: str = "posts", log: logging.Logger | None = None) -> None:
        self.connection = connection
        self._log = log or logger

    def on_page_fetched(self, page_number: int, new_items: int, total_items: int) -> None:
        self._log.info(
            "pagination_page_fetched",
            extra={
                "connection": self.connection,
                "page_number": page_number,
                "new_items": new_items,
                "total_items": total_items,
            },
        )

    def on_retry_scheduled(
        self, page_number: int, attempt: int, max_retries: int, delay_ms: int, error: str
    ) -> None:
        self._log.warning(
            "pagination_retry_scheduled",
            extra={
                "connection": self.connection,
                "page_number": page_number,
                "attempt": attempt,
                "max_retries": max_retries,
                "delay_ms": delay_ms,
                "error_message": error,
            },
        )

    def on_cap_reached(self, max_pages: int, total_items: int) -> None:
        self._log.warning(
            "pagination_cap_reached",
            extra={
                "connection": self.connection,
                "max_pages": max_pages,
                "total_items": total_items,
            },
        )

    def on_page_abandoned(
        self, page_number: int, attempts: int, error: str, total_items: int
    ) -> None:
        self._log.error(
            "pagination_page_abandoned",
            extra={
                "connection": self.connection,
                "page_number": page_number,
                "attempts": attempts,
                "error_message": error,
                "total_items": total_items,
            },
        )

    def on_complete(self, result: FetchResult) -> None:
        self._log.info(
            "pagination_complete",
            extra={
                "connection": self.connection,
                "total_items": result.total_items,
                "pages_fetched": result.pages_fetched,
                "requests_made": result.requests_made,
                "partial": result.partial,
                "stop_reason": result.stop_reason.value,
            },
        )
