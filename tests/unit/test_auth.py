"""Unit tests for session bootstrap (login)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from bonfire.graphql.auth import authenticate, login, token_preview
from bonfire.graphql.core import LoginRequestError, MissingTokenError, TransportError
from bonfire.graphql.documents import LOGIN_MUTATION
from bonfire.graphql.io import GraphQLClient


@pytest.fixture
def executor():
    executor = MagicMock()
    executor.mutate = AsyncMock(return_value={"login": {"token": "abc"}})
    return executor


class TestLogin:
    """Test login()."""

    @pytest.mark.asyncio
    async def test_login_returns_token(self, executor):
        """Test a well-formed response yields the token."""
        token = await login(executor, "alice", "secret")

        assert token == "abc"
        executor.mutate.assert_awaited_once_with(
            LOGIN_MUTATION, {"emailOrUsername": "alice", "password": "secret"}
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "data",
        [{"login": None}, {"login": {}}, {"login": {"token": None}}, {"login": {"token": ""}}],
    )
    async def test_login_missing_token(self, executor, data):
        """Test responses without a token raise MissingTokenError."""
        executor.mutate.return_value = data

        with pytest.raises(MissingTokenError):
            await login(executor, "alice", "secret")

    @pytest.mark.asyncio
    async def test_login_request_failure(self, executor):
        """Test executor failures raise LoginRequestError with the cause."""
        cause = TransportError("GraphQL error: invalid credentials")
        executor.mutate.side_effect = cause

        with pytest.raises(LoginRequestError) as exc_info:
            await login(executor, "alice", "wrong")

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_login_wraps_any_executor_error(self, executor):
        """Test errors outside the transport hierarchy still raise LoginRequestError."""
        cause = ConnectionError("reset")
        executor.mutate.side_effect = cause

        with pytest.raises(LoginRequestError) as exc_info:
            await login(executor, "alice", "secret")

        assert exc_info.value.cause is cause
        assert "reset" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_login_is_not_retried(self, executor):
        """Test login issues exactly one mutation even on failure."""
        executor.mutate.side_effect = TransportError("down")

        with pytest.raises(LoginRequestError):
            await login(executor, "alice", "secret")

        assert executor.mutate.await_count == 1


class TestAuthenticate:
    """Test authenticate()."""

    @pytest.mark.asyncio
    async def test_authenticate_returns_new_client(self):
        """Test authenticate builds a bearer client and leaves the original alone."""
        client = GraphQLClient.for_endpoint("https://example.com/graphql")
        client._http = MagicMock()
        client._http.post = AsyncMock(return_value={"data": {"login": {"token": "abc"}}})

        authed = await authenticate(client, "alice", "secret")

        assert authed is not client
        assert authed.session.auth_header == "Bearer abc"
        assert client.session.auth_header is None


def test_token_preview_truncates():
    assert token_preview("a" * 30) == "a" * 20 + "..."
    assert token_preview("short") == "short"
