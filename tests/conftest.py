"""Shared test fixtures for sttauth."""

import json

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

TEST_CLIENT_EMAIL = "test@example.iam.gserviceaccount.com"
TEST_TOKEN_URI = "https://oauth2.example/token"
TEST_PROJECT_ID = "dictation-test"


def _private_pem(key: RSAPrivateKey, fmt: serialization.PrivateFormat) -> str:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=fmt,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings at their defaults regardless of the host environment."""
    for name in (
        "STTAUTH_SCOPE",
        "STTAUTH_TOKEN_LIFETIME",
        "STTAUTH_HTTP_TIMEOUT",
        "STTAUTH_SIGNER_BACKEND",
        "STTAUTH_SPEECH_BASE_URL",
        "STTAUTH_SPEECH_LOCATION",
        "STTAUTH_SPEECH_DEFAULT_MODEL",
        "STTAUTH_SPEECH_DEFAULT_LANGUAGE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def rsa_key_1024() -> RSAPrivateKey:
    """A small throwaway key; keeps pure-Python signing fast."""
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture(scope="session")
def rsa_key_2048() -> RSAPrivateKey:
    """A 2048-bit throwaway key, the size real service accounts use."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def pkcs1_pem(rsa_key_1024: RSAPrivateKey) -> str:
    return _private_pem(rsa_key_1024, serialization.PrivateFormat.TraditionalOpenSSL)


@pytest.fixture(scope="session")
def pkcs8_pem(rsa_key_1024: RSAPrivateKey) -> str:
    return _private_pem(rsa_key_1024, serialization.PrivateFormat.PKCS8)


@pytest.fixture(scope="session")
def public_pem(rsa_key_1024: RSAPrivateKey) -> str:
    return (
        rsa_key_1024.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture(scope="session")
def pkcs8_pem_2048(rsa_key_2048: RSAPrivateKey) -> str:
    return _private_pem(rsa_key_2048, serialization.PrivateFormat.PKCS8)


@pytest.fixture(scope="session")
def public_pem_2048(rsa_key_2048: RSAPrivateKey) -> str:
    return (
        rsa_key_2048.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture
def service_account_info(pkcs8_pem: str) -> dict[str, str]:
    """A service account JSON mapping around the 1024-bit test key."""
    return {
        "type": "service_account",
        "project_id": TEST_PROJECT_ID,
        "private_key_id": "key-1",
        "private_key": pkcs8_pem,
        "client_email": TEST_CLIENT_EMAIL,
        "token_uri": TEST_TOKEN_URI,
    }


@pytest.fixture
def service_account_json(service_account_info: dict[str, str]) -> str:
    return json.dumps(service_account_info)
