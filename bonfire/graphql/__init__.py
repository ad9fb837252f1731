"""Bonfire GraphQL - async GraphQL client with cursor pagination and retry."""

from .auth import authenticate, login, token_preview
from .config import ClientConfig, Credentials
from .core import (
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
from .documents import GET_POSTS_QUERY, LOGIN_MUTATION
from .io import GraphQLClient, HTTPClient, PostsSource, RequestExecutor
from .models import (
    GetPostsData,
    LoginData,
    LoginPayload,
    PageInfo,
    Post,
    PostConnection,
    PostContent,
    PostEdge,
    Session,
)
from .runtime.pagination import (
    FetchResult,
    LoggingObserver,
    NullObserver,
    PaginationObserver,
    PaginationPolicy,
    StopReason,
    fetch_all,
    fetch_all_posts,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "GraphQLClient",
    "HTTPClient",
    "PostsSource",
    "RequestExecutor",
    "Session",
    # Auth
    "login",
    "authenticate",
    "token_preview",
    # Config
    "ClientConfig",
    "Credentials",
    # Pagination
    "fetch_all",
    "fetch_all_posts",
    "FetchResult",
    "PaginationPolicy",
    "StopReason",
    "PaginationObserver",
    "LoggingObserver",
    "NullObserver",
    # Documents
    "GET_POSTS_QUERY",
    "LOGIN_MUTATION",
    # Models
    "Post",
    "PostContent",
    "PostEdge",
    "PageInfo",
    "PostConnection",
    "GetPostsData",
    "LoginData",
    "LoginPayload",
    # Exceptions
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
