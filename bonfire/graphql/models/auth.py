"""Login mutation data models."""

from pydantic import BaseModel, ConfigDict


class LoginPayload(BaseModel):
    """Result of the ``login`` mutation."""

    token: str | None = None

    model_config = ConfigDict(frozen=True)


class LoginData(BaseModel):
    """``data`` payload of ``mutation Login``."""

    login: LoginPayload | None = None

    model_config = ConfigDict(frozen=True)
