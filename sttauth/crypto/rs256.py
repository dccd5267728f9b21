"""RSASSA-PKCS1-v1_5 with SHA-256 (RS256) on the in-house big-integer engine."""

import hashlib
from typing import Self

from sttauth.core.errors import KeyTooSmallError
from sttauth.crypto import base
from sttauth.crypto.bigint import BigUInt, mod_pow
from sttauth.crypto.der import load_key_material
from sttauth.crypto.types import RSAKeyMaterial

# DER of AlgorithmIdentifier{sha256, NULL} plus the OCTET STRING header, RFC 8017 9.2
SHA256_DIGEST_INFO_PREFIX = bytes.fromhex("3031300d060960864801650304020105000420")
PKCS1_V15_MIN_PADDING = 11


def sha256_digest_info(message: bytes) -> bytes:
    """DER DigestInfo for the SHA-256 hash of ``message``."""
    return SHA256_DIGEST_INFO_PREFIX + hashlib.sha256(message).digest()


def encode_pkcs1_v15(digest_info: bytes, k: int) -> bytes:
    """EMSA-PKCS1-v1_5 encoding: ``00 01 FF..FF 00 || digest_info``, k bytes long."""
    if k < len(digest_info) + PKCS1_V15_MIN_PADDING:
        raise KeyTooSmallError("Key too small for PKCS#1 v1.5 padding")
    padding = b"\xff" * (k - len(digest_info) - 3)
    return b"\x00\x01" + padding + b"\x00" + digest_info


def sign_rs256(message: bytes, key: RSAKeyMaterial) -> bytes:
    """Sign ``message`` with RS256 and return exactly ``key.size_in_bytes`` bytes."""
    k = key.size_in_bytes
    encoded = encode_pkcs1_v15(sha256_digest_info(message), k)
    signature = mod_pow(BigUInt.from_bytes(encoded), key.private_exponent, key.modulus)
    return signature.to_bytes(k)


class RSASigner(base.Signer, base.FromServiceAccountMixin):
    """RS256 signer built on :mod:`sttauth.crypto.bigint`."""

    def __init__(self, key: RSAKeyMaterial, key_id: str | None = None) -> None:
        self._key = key
        self._key_id = key_id

    @property
    def key_id(self) -> str | None:
        return self._key_id

    def sign(self, message: str | bytes) -> bytes:
        return sign_rs256(base.to_bytes(message), self._key)

    @classmethod
    def from_string(cls, key: str | bytes, key_id: str | None = None) -> Self:
        if isinstance(key, bytes):
            key = key.decode("utf-8")
        return cls(load_key_material(key), key_id=key_id)
