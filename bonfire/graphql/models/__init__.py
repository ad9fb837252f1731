"""Data models for the GraphQL wire shapes.

Architecture:
    Pydantic v2 models mirroring the operations this library issues. All
    models are immutable (frozen=True) and accept the camelCase field names
    used on the wire as aliases.

Model Categories:
    - Posts: Post, PostContent, PostEdge, PageInfo, PostConnection, GetPostsData
    - Auth: LoginPayload, LoginData
    - Client: Session
"""

from .auth import LoginData, LoginPayload
from .posts import GetPostsData, PageInfo, Post, PostConnection, PostContent, PostEdge
from .session import Session

__all__ = [
    "Post",
    "PostContent",
    "PostEdge",
    "PageInfo",
    "PostConnection",
    "GetPostsData",
    "LoginPayload",
    "LoginData",
    "Session",
]
