"""Type definitions for service account credentials and token responses."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sttauth.core.errors import MalformedCredentialsError
from sttauth.crypto.base import normalize_private_key


class ServiceAccountCredentials(BaseModel):
    """The fields of a service account JSON key used for token exchange."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    client_email: str
    private_key: str
    token_uri: str
    private_key_id: str | None = None
    project_id: str | None = None

    @field_validator("private_key")
    @classmethod
    def _normalize_newlines(cls, value: str) -> str:
        return normalize_private_key(value)

    @classmethod
    def from_json(cls, raw: str | bytes) -> Self:
        """Parse a service account JSON document."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise MalformedCredentialsError(f"Invalid service account JSON: {exc}") from exc


class TokenResponse(BaseModel):
    """OAuth token endpoint success body."""

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(min_length=1)
    token_type: str | None = None
    expires_in: float | None = None
