"""Post connection data models (``query GetPosts``)."""

from pydantic import BaseModel, ConfigDict, Field


class PostContent(BaseModel):
    """Renderable content of a post."""

    name: str | None = None
    summary: str | None = None
    html_body: str | None = Field(default=None, alias="htmlBody")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Post(BaseModel):
    """A single post node."""

    id: str = Field(..., min_length=1)
    post_content: PostContent | None = Field(default=None, alias="postContent")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def title(self) -> str | None:
        """Post title, if the post has content."""
        return self.post_content.name if self.post_content else None


class PageInfo(BaseModel):
    """Relay-style pagination info."""

    has_next_page: bool = Field(default=False, alias="hasNextPage")
    end_cursor: str | None = Field(default=None, alias="endCursor")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PostEdge(BaseModel):
    """Connection entry pairing a cursor with a post."""

    cursor: str | None = None
    node: Post | None = None

    model_config = ConfigDict(frozen=True)


class PostConnection(BaseModel):
    """One page of the ``posts`` connection."""

    edges: list[PostEdge | None] | None = None
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def nodes(self) -> list[Post]:
        """Non-null nodes of non-null edges, in edge order."""
        return [edge.node for edge in self.edges or [] if edge is not None and edge.node is not None]

    @property
    def next_cursor(self) -> str | None:
        """Cursor to continue from, or None when pagination cannot continue.

        A page reporting ``hasNextPage`` without an ``endCursor`` is treated
        as the last page.
        """
        if self.page_info.has_next_page and self.page_info.end_cursor is not None:
            return self.page_info.end_cursor
        return None


class GetPostsData(BaseModel):
    """``data`` payload of ``query GetPosts``."""

    posts: PostConnection | None = None

    model_config = ConfigDict(frozen=True)
