"""Exception hierarchy for credential decoding, signing and token exchange."""


class AuthError(Exception):
    """Base class for all service-account authentication failures."""


class MalformedCredentialsError(AuthError, ValueError):
    """The service account JSON or its private key could not be used."""


class DecodeError(MalformedCredentialsError):
    """The PEM armor, base64 payload or DER structure is invalid."""


class SigningError(AuthError):
    """An RS256 signature could not be produced."""


class KeyTooSmallError(SigningError):
    """The RSA modulus cannot hold a PKCS#1 v1.5 SHA-256 encoding."""


class TransportError(AuthError):
    """The token endpoint could not be reached."""


class RefreshError(AuthError):
    """The token endpoint rejected the assertion or answered unexpectedly."""

    def __init__(
        self, message: str, *, status_code: int | None = None, body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TranscriptionError(Exception):
    """A speech-to-text request failed."""
