"""Environment configuration.

Variables:
    BONFIRE_GRAPHQL_URI: GraphQL endpoint (default: public openscience.network API)
    BONFIRE_USERNAME / BONFIRE_PASSWORD: Optional credentials; set both or neither
    BONFIRE_PAGE_SIZE: Posts per page (default: 10)
    BONFIRE_MAX_PAGES: Page cap for a fetch-all walk (default: 50)
    BONFIRE_TIMEOUT: Request timeout in seconds (default: 30)
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.exceptions import ConfigError
from .runtime.pagination import PaginationPolicy

DEFAULT_ENDPOINT = "https://openscience.network/api/graphql"

ENV_URI = "BONFIRE_GRAPHQL_URI"
ENV_USERNAME = "BONFIRE_USERNAME"
ENV_PASSWORD = "BONFIRE_PASSWORD"
ENV_PAGE_SIZE = "BONFIRE_PAGE_SIZE"
ENV_MAX_PAGES = "BONFIRE_MAX_PAGES"
ENV_TIMEOUT = "BONFIRE_TIMEOUT"


class Credentials(BaseModel):
    """Login credentials."""

    email_or_username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, repr=False)

    model_config = ConfigDict(frozen=True)


class ClientConfig(BaseModel):
    """Client configuration."""

    endpoint_uri: str = Field(default=DEFAULT_ENDPOINT, min_length=1)
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    page_size: int = Field(default=10, ge=1)
    timeout: float = Field(default=30.0, gt=0)
    max_pages: int = Field(default=50, ge=1)
    max_retries_per_page: int = Field(default=3, ge=0)
    inter_page_delay_ms: int = Field(default=500, ge=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from environment variables.

        Raises:
            ConfigError: If a value is malformed or only one credential is set
        """
        env = os.environ if environ is None else environ
        if bool(env.get(ENV_USERNAME)) != bool(env.get(ENV_PASSWORD)):
            raise ConfigError(f"Both {ENV_USERNAME} and {ENV_PASSWORD} must be set, or neither")

        values: dict[str, object] = {
            "endpoint_uri": env.get(ENV_URI) or DEFAULT_ENDPOINT,
            "username": env.get(ENV_USERNAME) or None,
            "password": env.get(ENV_PASSWORD) or None,
        }
        for key, field_name in (
            (ENV_PAGE_SIZE, "page_size"),
            (ENV_MAX_PAGES, "max_pages"),
            (ENV_TIMEOUT, "timeout"),
        ):
            if env.get(key):
                values[field_name] = env[key]

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @property
    def authenticated(self) -> bool:
        return self.credentials is not None

    @property
    def credentials(self) -> Credentials | None:
        """Credentials when both are set, None when neither is.

        Raises:
            ConfigError: If exactly one of username/password is set
        """
        if self.username and self.password:
            return Credentials(email_or_username=self.username, password=self.password)
        if self.username or self.password:
            raise ConfigError(f"Both {ENV_USERNAME} and {ENV_PASSWORD} must be set, or neither")
        return None

    def pagination_policy(self) -> PaginationPolicy:
        return PaginationPolicy(
            max_pages=self.max_pages,
            max_retries_per_page=self.max_retries_per_page,
            inter_page_delay_ms=self.inter_page_delay_ms,
        )
