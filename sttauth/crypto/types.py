"""Type definitions for RSA key material and JWT assertion claims."""

from pydantic import BaseModel, ConfigDict

from sttauth.crypto.bigint import BigUInt


class RSAKeyMaterial(BaseModel):
    """The modulus and private exponent of an RSA private key."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    modulus: BigUInt
    private_exponent: BigUInt

    @property
    def size_in_bytes(self) -> int:
        """Signature length k, the byte length of the modulus."""
        return (self.modulus.bit_length() + 7) // 8


class AssertionClaims(BaseModel):
    """Claims of a JWT-bearer assertion, in serialization order."""

    model_config = ConfigDict(frozen=True)

    iss: str
    scope: str
    aud: str
    iat: int
    exp: int
