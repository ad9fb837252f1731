"""Posts connection source for the pagination loop."""

from __future__ import annotations

from pydantic import ValidationError

from ..core.exceptions import DataShapeError
from ..documents import GET_POSTS_QUERY
from ..models import GetPostsData, PostConnection
from .client import RequestExecutor


class PostsSource:
    """Fetches single pages of the ``posts`` connection."""

    def __init__(self, executor: RequestExecutor, document: str = GET_POSTS_QUERY) -> None:
        self._executor = executor
        self._document = document

    async def fetch_page(self, page_size: int, cursor: str | None = None) -> PostConnection | None:
        """Fetch one page starting after ``cursor``.

        Returns None when the response has no ``posts`` connection.

        Raises:
            TransportError: If the executor call failed
            DataShapeError: If the response does not match the posts schema
        """
        variables: dict[str, object] = {"first": page_size}
        if cursor is not None:
            variables["after"] = cursor

        data = await self._executor.query(self._document, variables)
        try:
            return GetPostsData.model_validate(data).posts
        except ValidationError as e:
            raise DataShapeError(f"Unexpected posts response shape: {e}") from e
