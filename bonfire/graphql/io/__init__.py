"""Request execution over GraphQL/HTTP."""

from .client import GraphQLClient, RequestExecutor
from .http_client import HTTPClient
from .posts import PostsSource

__all__ = ["HTTPClient", "GraphQLClient", "RequestExecutor", "PostsSource"]
