"""Signer interface shared by the pure-Python and cryptography backends."""

import abc
from collections.abc import Mapping
from typing import Any, Self

from sttauth.core.errors import MalformedCredentialsError

_JSON_FILE_PRIVATE_KEY = "private_key"
_JSON_FILE_PRIVATE_KEY_ID = "private_key_id"


def to_bytes(message: str | bytes) -> bytes:
    """Encode text as UTF-8, passing bytes through."""
    if isinstance(message, str):
        return message.encode("utf-8")
    return message


def normalize_private_key(key: str) -> str:
    """Turn literal ``\\n`` escapes into newlines and CRLF into LF."""
    return key.replace("\\n", "\n").replace("\r\n", "\n")


class Signer(metaclass=abc.ABCMeta):
    """Produces RS256 signatures over arbitrary messages."""

    @property
    @abc.abstractmethod
    def key_id(self) -> str | None:
        """Identifier of the signing key, if known.

        Informational only: the assertion header is fixed and carries no ``kid``.
        """
        raise NotImplementedError("Key id must be implemented")

    @abc.abstractmethod
    def sign(self, message: str | bytes) -> bytes:
        """Sign ``message`` and return the raw signature bytes."""
        raise NotImplementedError("Sign must be implemented")


class FromServiceAccountMixin(metaclass=abc.ABCMeta):
    """Builds signers from service account key material."""

    @classmethod
    @abc.abstractmethod
    def from_string(cls, key: str | bytes, key_id: str | None = None) -> Self:
        """Build a signer from PEM private key text."""
        raise NotImplementedError("from_string must be implemented")

    @classmethod
    def from_service_account_info(cls, info: Mapping[str, Any]) -> Self:
        """Build a signer from a parsed service account JSON mapping."""
        key = info.get(_JSON_FILE_PRIVATE_KEY)
        if not isinstance(key, str):
            raise MalformedCredentialsError(
                "The private_key field was not found in the service account info."
            )
        return cls.from_string(normalize_private_key(key), info.get(_JSON_FILE_PRIVATE_KEY_ID))
