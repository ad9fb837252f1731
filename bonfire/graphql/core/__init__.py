"""Core components."""

from .exceptions import (
    ConfigError,
    DataShapeError,
    GraphQLClientError,
    GraphQLResponseError,
    LoginError,
    LoginRequestError,
    MissingTokenError,
    NoDataError,
    TransportError,
)

__all__ = [
    "GraphQLClientError",
    "ConfigError",
    "TransportError",
    "GraphQLResponseError",
    "NoDataError",
    "DataShapeError",
    "LoginError",
    "LoginRequestError",
    "MissingTokenError",
]
