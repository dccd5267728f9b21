"""Settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"
TOKEN_LIFETIME_DEFAULT = 3600
HTTP_TIMEOUT_DEFAULT = 30.0


class AuthSettings(BaseSettings):
    """Service-account token settings."""

    model_config = SettingsConfigDict(env_prefix="STTAUTH_")

    scope: str = CLOUD_PLATFORM_SCOPE
    token_lifetime: int = TOKEN_LIFETIME_DEFAULT
    http_timeout: float = HTTP_TIMEOUT_DEFAULT
    signer_backend: str = "python"


class SpeechSettings(BaseSettings):
    """Google Cloud Speech-to-Text v2 endpoint settings."""

    model_config = SettingsConfigDict(env_prefix="STTAUTH_SPEECH_")

    base_url: str = "https://speech.googleapis.com/v2"
    location: str = "global"
    default_model: str = "chirp_3"
    default_language: str = "en-US"

    def recognize_url(self, project_id: str, location: str | None = None) -> str:
        """Build the ``recognizers/_:recognize`` URL for a project."""
        base = self.base_url.rstrip("/")
        loc = location or self.location
        return f"{base}/projects/{project_id}/locations/{loc}/recognizers/_:recognize"
