"""Client session model."""

from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """Endpoint and credentials used by one client instance.

    Sessions are never mutated. Changing credentials means building a new
    session (and a new client around it) with :meth:`with_bearer`.
    """

    endpoint_uri: str = Field(..., min_length=1)
    auth_header: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def authenticated(self) -> bool:
        return self.auth_header is not None

    def headers(self) -> dict[str, str]:
        """Outgoing headers for every request made with this session."""
        headers = {"Content-Type": "application/json"}
        if self.auth_header:
            headers["Authorization"] = self.auth_header
        return headers

    def with_bearer(self, token: str) -> "Session":
        """Return a new session authenticated with ``token``."""
        return self.model_copy(update={"auth_header": f"Bearer {token}"})
