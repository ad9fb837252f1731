"""Unit tests for the bonfire-posts command."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from bonfire.graphql import cli
from bonfire.graphql.config import ClientConfig
from bonfire.graphql.core import LoginRequestError, MissingTokenError, TransportError
from bonfire.graphql.models import Post
from bonfire.graphql.runtime.pagination import FetchResult, StopReason

ONE_PAGE = {
    "posts": {
        "edges": [
            {"cursor": "c1", "node": {"id": "1", "postContent": {"name": "First", "summary": "x" * 150}}},
            {"cursor": "c2", "node": {"id": "2"}},
        ],
        "pageInfo": {"hasNextPage": False, "endCursor": "c2"},
    }
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BONFIRE_GRAPHQL_URI", "BONFIRE_USERNAME", "BONFIRE_PASSWORD"):
        monkeypatch.delenv(name, raising=False)


def make_client(query_result=ONE_PAGE, login_result=None) -> MagicMock:
    client = MagicMock()
    client.query = AsyncMock(return_value=query_result)
    client.mutate = AsyncMock(return_value=login_result or {"login": {"token": "tok"}})
    client.close = AsyncMock()
    client.with_bearer = MagicMock(return_value=client)
    return client


class TestRun:
    """Test the run() flow."""

    @pytest.mark.asyncio
    async def test_unauthenticated_run(self, capsys):
        """Test posts are fetched without logging in when no credentials are set."""
        client = make_client()
        config = ClientConfig(inter_page_delay_ms=0)

        with patch.object(cli.GraphQLClient, "for_endpoint", return_value=client):
            result = await cli.run(config)

        assert [post.id for post in result.items] == ["1", "2"]
        client.mutate.assert_not_awaited()
        client.close.assert_awaited()
        out = capsys.readouterr().out
        assert "UNAUTHENTICATED" in out
        assert "Total posts: 2" in out
        assert "Title: First" in out
        assert "Title: (no title)" in out

    @pytest.mark.asyncio
    async def test_authenticated_run_uses_bearer_client(self, capsys):
        """Test credentials trigger login and a new bearer client."""
        client = make_client()
        config = ClientConfig(username="alice", password="secret", inter_page_delay_ms=0)

        with patch.object(cli.GraphQLClient, "for_endpoint", return_value=client):
            await cli.run(config)

        client.mutate.assert_awaited_once()
        client.with_bearer.assert_called_once_with("tok")
        assert "Authentication mode: AUTHENTICATED" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_login_failure_propagates(self):
        """Test a missing token stops the flow before fetching posts."""
        client = make_client(login_result={"login": None})
        config = ClientConfig(username="alice", password="secret")

        with patch.object(cli.GraphQLClient, "for_endpoint", return_value=client):
            with pytest.raises(MissingTokenError):
                await cli.run(config)

        client.query.assert_not_awaited()
        client.close.assert_awaited()


class TestFormatting:
    """Test console rendering helpers."""

    def test_format_post_truncates(self):
        post = Post.model_validate({"id": "9", "postContent": {"summary": "y" * 150}})
        text = cli.format_post(1, post)
        assert "1. Post ID: 9" in text
        assert f"Summary: {'y' * 100}..." in text
        assert "HTML Body: (no htmlBody)" in text

    def test_print_result_reports_partial(self, capsys):
        result = FetchResult(
            items=[],
            partial=True,
            stop_reason=StopReason.RETRIES_EXHAUSTED,
            last_error="down",
        )
        cli.print_result(result, limit_display=5)

        out = capsys.readouterr().out
        assert "No posts were fetched" in out
        assert "repeated failures: down" in out

    def test_print_result_reports_shape_error(self, capsys):
        result = FetchResult(
            items=[],
            partial=True,
            stop_reason=StopReason.DATA_SHAPE,
            last_error="Unexpected posts response shape",
        )
        cli.print_result(result, limit_display=5)

        assert "unexpected response" in capsys.readouterr().out


class TestMain:
    """Test exit codes of main()."""

    def test_half_configured_credentials_exit_2(self, monkeypatch, capsys):
        monkeypatch.setenv("BONFIRE_USERNAME", "alice")

        assert cli.main([]) == cli.EXIT_CONFIG
        assert "must be set, or neither" in capsys.readouterr().err

    def test_login_failure_exit_1(self, monkeypatch, capsys):
        monkeypatch.setenv("BONFIRE_USERNAME", "alice")
        monkeypatch.setenv("BONFIRE_PASSWORD", "secret")
        error = LoginRequestError("Login request failed: down", cause=TransportError("down"))

        with patch.object(cli, "run", AsyncMock(side_effect=error)):
            assert cli.main([]) == cli.EXIT_FAILURE

        err = capsys.readouterr().err
        assert "Login failed" in err
        assert "Troubleshooting" in err

    def test_success_exit_0(self):
        with patch.object(cli, "run", AsyncMock()) as run:
            assert cli.main(["--page-size", "3", "--max-pages", "2"]) == cli.EXIT_OK

        config = run.await_args.args[0]
        assert config.page_size == 3
        assert config.max_pages == 2

    def test_invalid_override_exit_2(self):
        assert cli.main(["--page-size", "0"]) == cli.EXIT_CONFIG

    def test_unexpected_error_exit_1(self):
        with patch.object(cli, "run", AsyncMock(side_effect=RuntimeError("boom"))):
            assert cli.main([]) == cli.EXIT_FAILURE
