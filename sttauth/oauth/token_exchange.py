"""JWT-bearer grant (RFC 7523) against an OAuth2 token endpoint."""

import httpx
from pydantic import ValidationError

from sttauth.core.errors import RefreshError, TransportError
from sttauth.core.settings import HTTP_TIMEOUT_DEFAULT
from sttauth.oauth.types import TokenResponse

JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"


def build_grant_form(assertion: str) -> dict[str, str]:
    """Form fields for the JWT-bearer grant."""
    return {"grant_type": JWT_BEARER_GRANT_TYPE, "assertion": assertion}


def parse_token_response(response: httpx.Response) -> str:
    """Return the access token from a token endpoint response."""
    if not response.is_success:
        raise RefreshError(
            f"Token exchange failed: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )
    try:
        token = TokenResponse.model_validate_json(response.content)
    except ValidationError as exc:
        raise RefreshError(
            f"Failed to parse token response: {exc}",
            status_code=response.status_code,
            body=response.text,
        ) from exc
    return token.access_token


async def exchange_assertion(
    token_uri: str,
    assertion: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = HTTP_TIMEOUT_DEFAULT,
) -> str:
    """POST ``assertion`` to ``token_uri`` and return the bearer access token.

    A supplied ``client`` is used as-is; otherwise a client with ``timeout``
    is opened for this single request.
    """
    form = build_grant_form(assertion)
    try:
        if client is not None:
            response = await client.post(token_uri, data=form)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.post(token_uri, data=form)
    except httpx.HTTPError as exc:
        raise TransportError(f"Failed to exchange JWT for token: {exc}") from exc
    return parse_token_response(response)
