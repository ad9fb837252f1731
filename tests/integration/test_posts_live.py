"""Integration tests against a live Bonfire GraphQL endpoint."""

import pytest

from bonfire.graphql import GraphQLClient, StopReason, fetch_all_posts


@pytest.mark.asyncio
async def test_fetch_first_pages_of_posts(live_config):
    """Test a short capped walk returns posts with ids."""
    async with GraphQLClient.for_endpoint(
        live_config.endpoint_uri, timeout=live_config.timeout
    ) as client:
        result = await fetch_all_posts(client, page_size=5, max_pages=2)

    assert result.stop_reason in (StopReason.EXHAUSTED, StopReason.CAP_REACHED)
    assert all(post.id for post in result.items)
