"""Type definitions for the Google Cloud Speech-to-Text v2 client."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

GOOGLE_CLOUD_MODELS = ["chirp_3", "chirp_2", "long", "short"]


class GoogleAuthMethod(StrEnum):
    """How requests to the Speech API are authorized."""

    API_KEY = "api_key"
    SERVICE_ACCOUNT = "service_account"


class GoogleCloudSTTConfig(BaseModel):
    """Provider configuration handed over by the settings store."""

    project_id: str = ""
    api_key: str = ""
    model: str = ""
    location: str = ""
    auth_method: GoogleAuthMethod = GoogleAuthMethod.API_KEY
    service_account_json: str | None = None


class RecognitionFeatures(BaseModel):
    enable_automatic_punctuation: bool = True


class RecognitionConfig(BaseModel):
    auto_decoding_config: dict[str, str] = Field(default_factory=dict)
    language_codes: list[str]
    model: str
    features: RecognitionFeatures | None = None


class RecognizeRequest(BaseModel):
    """Body of ``recognizers/_:recognize``; ``content`` is base64 audio."""

    config: RecognitionConfig
    content: str


class SpeechAlternative(BaseModel):
    model_config = ConfigDict(extra="ignore")

    transcript: str = ""


class SpeechRecognitionResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    alternatives: list[SpeechAlternative] | None = None


class RecognizeResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    results: list[SpeechRecognitionResult] | None = None

    def transcript(self) -> str:
        """Join the top alternative of every result."""
        parts = [
            result.alternatives[0].transcript
            for result in self.results or []
            if result.alternatives
        ]
        return " ".join(parts).strip()
