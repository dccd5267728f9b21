"""Google Cloud Speech-to-Text v2 client using API keys or service accounts."""

import base64

import httpx
from loguru import logger
from pydantic import ValidationError

from sttauth.core.errors import AuthError, TranscriptionError
from sttauth.core.settings import AuthSettings, SpeechSettings
from sttauth.oauth.service_account import fetch_access_token
from sttauth.oauth.types import ServiceAccountCredentials
from sttauth.stt.types import (
    GOOGLE_CLOUD_MODELS,
    GoogleAuthMethod,
    GoogleCloudSTTConfig,
    RecognitionConfig,
    RecognitionFeatures,
    RecognizeRequest,
    RecognizeResponse,
)

PROVIDER_NAME = "Google Cloud STT"


class GoogleCloudSTTClient:
    """Transcribes audio with the ``_:recognize`` method of the v2 API."""

    def __init__(
        self,
        config: GoogleCloudSTTConfig,
        *,
        client: httpx.AsyncClient | None = None,
        auth_settings: AuthSettings | None = None,
        speech_settings: SpeechSettings | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._auth_settings = auth_settings or AuthSettings()
        self._speech = speech_settings or SpeechSettings()
        self.model = config.model or self._speech.default_model
        self.location = config.location or self._speech.location

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    def _credentials(self) -> ServiceAccountCredentials:
        if not self._config.service_account_json:
            raise TranscriptionError("Service account JSON not configured")
        return ServiceAccountCredentials.from_json(self._config.service_account_json)

    def _project_id(self, credentials: ServiceAccountCredentials | None) -> str:
        project_id = self._config.project_id
        if not project_id and credentials is not None:
            project_id = credentials.project_id or ""
        if not project_id:
            raise TranscriptionError("Project ID not configured")
        return project_id

    async def _access_token(self, credentials: ServiceAccountCredentials) -> str:
        logger.debug("Requesting access token for {}", credentials.client_email)
        return await fetch_access_token(
            credentials, client=self._client, settings=self._auth_settings
        )

    async def transcribe(self, audio: bytes, language: str | None = None) -> str:
        """Send ``audio`` for recognition and return the joined transcript."""
        headers = {"Content-Type": "application/json"}
        params: dict[str, str] = {}
        if self._config.auth_method is GoogleAuthMethod.SERVICE_ACCOUNT:
            credentials = self._credentials()
            project_id = self._project_id(credentials)
            token = await self._access_token(credentials)
            headers["Authorization"] = f"Bearer {token}"
        else:
            if not self._config.api_key:
                raise TranscriptionError("API key not configured")
            project_id = self._project_id(None)
            params["key"] = self._config.api_key

        body = RecognizeRequest(
            config=RecognitionConfig(
                language_codes=[language or self._speech.default_language],
                model=self.model,
                features=RecognitionFeatures(enable_automatic_punctuation=True),
            ),
            content=base64.b64encode(audio).decode("ascii"),
        )
        url = self._speech.recognize_url(project_id, self.location)
        logger.debug(
            "Google Cloud STT request: model={} auth={} bytes={}",
            self.model,
            self._config.auth_method.value,
            len(audio),
        )
        response = await self._post(url, body, headers, params)

        if not response.is_success:
            logger.warning("Google Cloud STT API error {}", response.status_code)
            raise TranscriptionError(
                f"Google Cloud STT API error ({response.status_code}): {response.text}"
            )
        try:
            parsed = RecognizeResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise TranscriptionError(
                f"Failed to parse Google Cloud STT response: {exc}"
            ) from exc

        transcript = parsed.transcript()
        if not transcript:
            raise TranscriptionError("No transcription from Google Cloud STT")
        return transcript

    async def _post(
        self,
        url: str,
        body: RecognizeRequest,
        headers: dict[str, str],
        params: dict[str, str],
    ) -> httpx.Response:
        payload = body.model_dump(exclude_none=True)
        try:
            if self._client is not None:
                return await self._client.post(
                    url, json=payload, headers=headers, params=params
                )
            async with httpx.AsyncClient(timeout=self._auth_settings.http_timeout) as client:
                return await client.post(url, json=payload, headers=headers, params=params)
        except httpx.HTTPError as exc:
            raise TranscriptionError(
                f"Failed to connect to Google Cloud STT: {exc}"
            ) from exc

    async def list_models(self) -> list[str]:
        return list(GOOGLE_CLOUD_MODELS)

    async def test_connection(self) -> bool:
        """Check the configuration; service accounts perform a real token exchange."""
        if self._config.auth_method is GoogleAuthMethod.API_KEY:
            if not self._config.api_key:
                raise TranscriptionError("API key not configured")
            self._project_id(None)
            return True
        credentials = self._credentials()
        self._project_id(credentials)
        try:
            await self._access_token(credentials)
        except AuthError as exc:
            logger.warning("Service account token exchange failed: {}", exc)
            raise
        return True
