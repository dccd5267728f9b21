"""End-to-end signing with a 2048-bit key and a fake token endpoint."""

import base64
import json

import httpx
import jwt
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from sttauth.crypto.jwt_assertion import encode_assertion, make_claims
from sttauth.crypto.rs256 import RSASigner
from sttauth.oauth.service_account import fetch_access_token_from_json

ISSUER = "test@example.iam.gserviceaccount.com"
SCOPE = "https://www.googleapis.com/auth/cloud-platform"
AUDIENCE = "https://oauth2.example/token"
ISSUED_AT = 1700000000


class TestServiceAccountFlow:
    """Pure-Python signer against standard RS256 verifiers."""

    def test_assertion_verifies(
        self, rsa_key_2048: RSAPrivateKey, pkcs8_pem_2048: str, public_pem_2048: str
    ) -> None:
        claims = make_claims(ISSUER, SCOPE, AUDIENCE, issued_at=ISSUED_AT)
        token = encode_assertion(claims, RSASigner.from_string(pkcs8_pem_2048))

        decoded = jwt.decode(
            token,
            public_pem_2048,
            algorithms=["RS256"],
            audience=AUDIENCE,
            issuer=ISSUER,
            options={"verify_exp": False},
        )
        assert decoded["iat"] == ISSUED_AT
        assert decoded["exp"] == ISSUED_AT + 3600

        signing_input, _, signature_b64 = token.rpartition(".")
        signature = base64.urlsafe_b64decode(signature_b64 + "=" * (-len(signature_b64) % 4))
        assert len(signature) == 256
        rsa_key_2048.public_key().verify(
            signature, signing_input.encode(), padding.PKCS1v15(), hashes.SHA256()
        )

    async def test_token_from_json(self, pkcs8_pem_2048: str) -> None:
        posted: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            posted.append(request.content.decode())
            return httpx.Response(
                200,
                json={"access_token": "abc", "token_type": "Bearer", "expires_in": 3600},
            )

        raw = json.dumps(
            {
                "client_email": ISSUER,
                "private_key": pkcs8_pem_2048.replace("\n", "\\n"),
                "token_uri": AUDIENCE,
            }
        )
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            token = await fetch_access_token_from_json(raw, client=client)

        assert token == "abc"
        assert posted[0].startswith(
            "grant_type=urn%3Aietf%3Aparams%3Aoauth%3Agrant-type%3Ajwt-bearer&assertion="
        )
