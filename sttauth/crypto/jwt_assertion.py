"""Compact RS256 JWT assertions for the OAuth2 JWT-bearer grant."""

import base64
import json
import time

from sttauth.crypto.base import Signer
from sttauth.crypto.types import AssertionClaims

ASSERTION_DEFAULT_LIFETIME = 3600
JWT_HEADER = '{"alg":"RS256","typ":"JWT"}'


def b64url_encode(data: bytes) -> str:
    """Base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def make_claims(
    issuer: str,
    scope: str,
    audience: str,
    issued_at: int | None = None,
    lifetime: int = ASSERTION_DEFAULT_LIFETIME,
) -> AssertionClaims:
    """Build fresh assertion claims; ``issued_at`` defaults to now."""
    iat = int(time.time()) if issued_at is None else issued_at
    return AssertionClaims(iss=issuer, scope=scope, aud=audience, iat=iat, exp=iat + lifetime)


def encode_assertion(claims: AssertionClaims, signer: Signer) -> str:
    """Serialize and sign ``claims`` as ``header.claims.signature``."""
    header_b64 = b64url_encode(JWT_HEADER.encode("ascii"))
    claims_json = json.dumps(claims.model_dump(), separators=(",", ":"))
    claims_b64 = b64url_encode(claims_json.encode("utf-8"))
    signing_input = f"{header_b64}.{claims_b64}"
    signature_b64 = b64url_encode(signer.sign(signing_input.encode("ascii")))
    return f"{signing_input}.{signature_b64}"
