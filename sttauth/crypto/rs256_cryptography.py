"""RS256 signer backed by the ``cryptography`` package."""

from typing import Self

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from sttauth.core.errors import DecodeError, KeyTooSmallError
from sttauth.crypto import base
from sttauth.crypto.rs256 import PKCS1_V15_MIN_PADDING, SHA256_DIGEST_INFO_PREFIX

_SHA256_DIGEST_INFO_LENGTH = len(SHA256_DIGEST_INFO_PREFIX) + 32


class CryptographyRSASigner(base.Signer, base.FromServiceAccountMixin):
    """Drop-in replacement for :class:`sttauth.crypto.rs256.RSASigner`."""

    def __init__(self, private_key: RSAPrivateKey, key_id: str | None = None) -> None:
        self._key = private_key
        self._key_id = key_id

    @property
    def key_id(self) -> str | None:
        return self._key_id

    def sign(self, message: str | bytes) -> bytes:
        if (self._key.key_size + 7) // 8 < _SHA256_DIGEST_INFO_LENGTH + PKCS1_V15_MIN_PADDING:
            raise KeyTooSmallError("Key too small for PKCS#1 v1.5 padding")
        return self._key.sign(base.to_bytes(message), padding.PKCS1v15(), hashes.SHA256())

    @classmethod
    def from_string(cls, key: str | bytes, key_id: str | None = None) -> Self:
        try:
            loaded = serialization.load_pem_private_key(base.to_bytes(key), password=None)
        except (ValueError, TypeError) as exc:
            raise DecodeError(f"Failed to load PEM private key: {exc}") from exc
        if not isinstance(loaded, RSAPrivateKey):
            raise DecodeError("Private key is not an RSA key")
        return cls(loaded, key_id=key_id)
