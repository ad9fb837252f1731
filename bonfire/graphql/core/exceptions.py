"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class GraphQLClientError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigError(GraphQLClientError):
    """Malformed client configuration.

    Raised at startup, never retried. The most common cause is setting only
    one of the two credential variables.
    """

    pass


class TransportError(GraphQLClientError):
    """A query or mutation against the endpoint failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class GraphQLResponseError(TransportError):
    """Response carried a GraphQL ``errors`` field.

    Accompanying partial data is discarded.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class NoDataError(TransportError):
    """Response had neither errors nor data."""

    pass


class DataShapeError(GraphQLClientError):
    """Response succeeded but lacked an expected field.

    Retrying cannot fix a shape mismatch, so this is never retried.
    """

    pass


class LoginError(GraphQLClientError):
    """Base class for session bootstrap failures."""

    pass


class LoginRequestError(LoginError):
    """The login mutation itself failed."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class MissingTokenError(LoginError, DataShapeError):
    """Login response was well-formed but carried no token."""

    def __init__(self, message: str = "Login response missing token") -> None:
        super().__init__(message)
