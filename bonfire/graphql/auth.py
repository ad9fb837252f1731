"""Session bootstrap: exchange credentials for a bearer token."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from .core.exceptions import LoginRequestError, MissingTokenError
from .documents import LOGIN_MUTATION
from .io.client import GraphQLClient, RequestExecutor
from .models import LoginData

logger = logging.getLogger(__name__)


async def login(executor: RequestExecutor, email_or_username: str, password: str) -> str:
    """Run the login mutation once and return the issued token.

    No retry happens here; a failed login is terminal for the caller.

    Raises:
        LoginRequestError: If the mutation call failed
        MissingTokenError: If the response carried no token
    """
    try:
        data = await executor.mutate(
            LOGIN_MUTATION,
            {"emailOrUsername": email_or_username, "password": password},
        )
    except Exception as e:
        logger.error("login_failed", extra={"error_type": type(e).__name__, "error_message": str(e)})
        raise LoginRequestError(f"Login request failed: {e}", cause=e) from e

    try:
        payload = LoginData.model_validate(data).login
    except ValidationError as e:
        raise MissingTokenError() from e

    if payload is None or not payload.token:
        raise MissingTokenError()

    logger.info("login_succeeded", extra={"token_preview": token_preview(payload.token)})
    return payload.token


async def authenticate(
    client: GraphQLClient, email_or_username: str, password: str
) -> GraphQLClient:
    """Log in with ``client`` and return a new bearer-authenticated client.

    ``client`` itself is not modified and stays usable unauthenticated.
    """
    token = await login(client, email_or_username, password)
    return client.with_bearer(token)


def token_preview(token: str, length: int = 20) -> str:
    """Return a shortened token safe to print."""
    if len(token) <= length:
        return token
    return f"{token[:length]}..."
