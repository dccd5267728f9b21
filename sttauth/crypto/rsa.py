"""Selects the RS256 signer backend by name."""

from typing import TYPE_CHECKING

from sttauth.crypto.rs256 import RSASigner

if TYPE_CHECKING:
    from sttauth.crypto.rs256_cryptography import CryptographyRSASigner

SIGNER_BACKENDS = ("python", "cryptography")


def get_signer_class(
    backend: str = "python",
) -> "type[RSASigner] | type[CryptographyRSASigner]":
    """Return the signer class for ``backend``: ``python`` or ``cryptography``."""
    if backend == "python":
        return RSASigner
    if backend == "cryptography":
        from sttauth.crypto.rs256_cryptography import CryptographyRSASigner

        return CryptographyRSASigner
    raise ValueError(f"Unknown signer backend {backend!r}, expected one of {SIGNER_BACKENDS}")
