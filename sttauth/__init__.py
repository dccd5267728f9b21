"""Service-account authentication for cloud speech-to-text."""

from sttauth.core.errors import (
    AuthError,
    DecodeError,
    KeyTooSmallError,
    MalformedCredentialsError,
    RefreshError,
    SigningError,
    TranscriptionError,
    TransportError,
)
from sttauth.oauth.service_account import fetch_access_token, fetch_access_token_from_json
from sttauth.oauth.types import ServiceAccountCredentials

__all__ = [
    "AuthError",
    "DecodeError",
    "KeyTooSmallError",
    "MalformedCredentialsError",
    "RefreshError",
    "ServiceAccountCredentials",
    "SigningError",
    "TranscriptionError",
    "TransportError",
    "fetch_access_token",
    "fetch_access_token_from_json",
]
