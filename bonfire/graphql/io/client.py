"""GraphQL request executor over HTTP.

Architecture:
    GraphQLClient posts ``{"query", "variables"}`` payloads to a single
    endpoint and normalises every outcome into either the response ``data``
    mapping or a TransportError. Callers never see raw aiohttp exceptions.

Design Decisions:
    - Immutable session: endpoint and auth header are fixed per instance;
      re-authenticating builds a new client via with_bearer().
    - Errors win: a response with ``errors`` is a failure even when it also
      carries partial ``data``.
    - Missing data is a distinct failure (NoDataError).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

import aiohttp

from ..core.exceptions import GraphQLResponseError, NoDataError, TransportError
from ..models import Session
from .http_client import HTTPClient

logger = logging.getLogger(__name__)


class RequestExecutor(Protocol):
    """Anything that can run a GraphQL query or mutation.

    Both operations return the response ``data`` mapping or raise
    TransportError.
    """

    async def query(
        self, document: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]: ...

    async def mutate(
        self, document: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]: ...


class GraphQLClient:
    """Request executor bound to one immutable Session."""

    def __init__(self, session: Session, *, timeout: float = 30.0) -> None:
        self._session = session
        self._timeout = timeout
        self._http = HTTPClient(timeout=timeout)

    @classmethod
    def for_endpoint(
        cls, endpoint_uri: str, *, token: str | None = None, timeout: float = 30.0
    ) -> GraphQLClient:
        session = Session(endpoint_uri=endpoint_uri)
        if token:
            session = session.with_bearer(token)
        return cls(session, timeout=timeout)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def timeout(self) -> float:
        return self._timeout

    def with_session(self, session: Session) -> GraphQLClient:
        """Return a new client for ``session``; this client is left untouched."""
        return GraphQLClient(session, timeout=self._timeout)

    def with_bearer(self, token: str) -> GraphQLClient:
        """Return a new client sending ``Authorization: Bearer <token>``."""
        return self.with_session(self._session.with_bearer(token))

    async def query(
        self, document: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Run a query and return its ``data``."""
        return await self._execute("Query", document, variables)

    async def mutate(
        self, document: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Run a mutation and return its ``data``."""
        return await self._execute("Mutation", document, variables)

    async def _execute(
        self, kind: str, document: str, variables: dict[str, Any] | None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": document}
        if variables:
            payload["variables"] = variables

        try:
            body = await self._http.post(
                self._session.endpoint_uri,
                json_body=payload,
                headers=self._session.headers(),
            )
        except aiohttp.ClientResponseError as e:
            raise TransportError(f"{kind} failed: {e.message}", status_code=e.status) from e
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise TransportError(f"{kind} failed: {e!r}") from e

        return self._unwrap(kind, body)

    @staticmethod
    def _unwrap(kind: str, body: Any) -> dict[str, Any]:
        if not isinstance(body, dict):
            raise NoDataError(f"{kind} returned no data")

        errors = body.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) else errors
            message = first.get("message", str(first)) if isinstance(first, dict) else str(first)
            logger.debug(
                "graphql_errors",
                extra={"kind": kind, "error_count": len(errors) if isinstance(errors, list) else 1},
            )
            raise GraphQLResponseError(
                f"GraphQL error: {message}",
                errors=errors if isinstance(errors, list) else [errors],
            )

        data = body.get("data")
        if data is None:
            raise NoDataError(f"{kind} returned no data")
        return data

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> GraphQLClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
