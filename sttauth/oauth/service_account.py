"""Service account credentials to bearer token: decode, sign, exchange.

Every call parses the key, builds fresh claims and performs one token
exchange. Nothing is cached between calls.
"""

import httpx

from sttauth.core.settings import AuthSettings
from sttauth.crypto.jwt_assertion import encode_assertion, make_claims
from sttauth.crypto.rsa import get_signer_class
from sttauth.oauth.token_exchange import exchange_assertion
from sttauth.oauth.types import ServiceAccountCredentials


def build_assertion(
    credentials: ServiceAccountCredentials,
    scope: str,
    *,
    now: int | None = None,
    settings: AuthSettings | None = None,
) -> str:
    """Sign a JWT-bearer assertion for ``credentials`` addressed to its token URI."""
    settings = settings or AuthSettings()
    signer_cls = get_signer_class(settings.signer_backend)
    signer = signer_cls.from_string(credentials.private_key, credentials.private_key_id)
    claims = make_claims(
        issuer=credentials.client_email,
        scope=scope,
        audience=credentials.token_uri,
        issued_at=now,
        lifetime=settings.token_lifetime,
    )
    return encode_assertion(claims, signer)


async def fetch_access_token(
    credentials: ServiceAccountCredentials,
    scope: str | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    now: int | None = None,
    settings: AuthSettings | None = None,
) -> str:
    """Return a fresh bearer token for ``credentials`` and ``scope``."""
    settings = settings or AuthSettings()
    assertion = build_assertion(
        credentials, scope or settings.scope, now=now, settings=settings
    )
    return await exchange_assertion(
        credentials.token_uri,
        assertion,
        client=client,
        timeout=settings.http_timeout,
    )


async def fetch_access_token_from_json(
    service_account_json: str,
    scope: str | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    settings: AuthSettings | None = None,
) -> str:
    """Parse a service account JSON document and return a fresh bearer token."""
    credentials = ServiceAccountCredentials.from_json(service_account_json)
    return await fetch_access_token(credentials, scope, client=client, settings=settings)
