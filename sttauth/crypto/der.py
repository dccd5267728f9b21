"""PEM unwrapping and a minimal DER walker for RSA private keys.

Only the fields needed for signing are read: the modulus and the private
exponent. Both bare PKCS#1 ``RSAPrivateKey`` and PKCS#8 ``PrivateKeyInfo``
wrappers are accepted. A key is treated as PKCS#8 when the element after the
leading version INTEGER is a SEQUENCE (the AlgorithmIdentifier).
"""

import base64
import binascii

from sttauth.core.errors import DecodeError
from sttauth.crypto.bigint import BigUInt
from sttauth.crypto.types import RSAKeyMaterial

TAG_INTEGER = 0x02
TAG_OCTET_STRING = 0x04
TAG_NULL = 0x05
TAG_OID = 0x06
TAG_SEQUENCE = 0x30

_PEM_LABEL = "PRIVATE KEY"
_MAX_LENGTH_BYTES = 4


def pem_to_der(pem: str) -> bytes:
    """Extract and base64-decode the body of a ``BEGIN ... PRIVATE KEY`` block."""
    body = []
    in_block = False
    for line in pem.splitlines():
        upper = line.upper()
        if _PEM_LABEL in upper and "BEGIN" in upper:
            in_block = True
            continue
        if _PEM_LABEL in upper and "END" in upper:
            break
        if in_block:
            body.append(line.strip())
    if not in_block:
        raise DecodeError("No PRIVATE KEY block found in PEM text")
    try:
        return base64.b64decode("".join(body), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Failed to decode PEM base64: {exc}") from exc


class _Reader:
    """Cursor over DER bytes; every read is bounds-checked."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self.pos = 0

    def peek(self) -> int | None:
        if self.pos >= len(self._data):
            return None
        return self._data[self.pos]

    def read_length(self) -> int:
        if self.pos >= len(self._data):
            raise DecodeError("Unexpected end of data while reading length")
        first = self._data[self.pos]
        self.pos += 1
        if first & 0x80 == 0:
            return first
        count = first & 0x7F
        if count == 0:
            raise DecodeError("Indefinite length is not allowed in DER")
        if count > _MAX_LENGTH_BYTES:
            raise DecodeError(f"Length field of {count} bytes is too large")
        if self.pos + count > len(self._data):
            raise DecodeError("Invalid length encoding")
        length = int.from_bytes(self._data[self.pos : self.pos + count], "big")
        self.pos += count
        return length

    def expect(self, tag: int) -> int:
        """Consume a tag and its length, returning the content length."""
        if self.peek() != tag:
            raise DecodeError(f"Expected tag 0x{tag:02x}")
        self.pos += 1
        length = self.read_length()
        if self.pos + length > len(self._data):
            raise DecodeError(f"Element with tag 0x{tag:02x} overruns the data")
        return length

    def skip(self, length: int) -> None:
        self.pos += length

    def read_integer(self) -> bytes:
        length = self.expect(TAG_INTEGER)
        if length == 0:
            raise DecodeError("Empty INTEGER")
        value = self._data[self.pos : self.pos + length]
        self.pos += length
        while len(value) > 1 and value[0] == 0:
            value = value[1:]
        return value


def _skip_pkcs8_header(reader: _Reader) -> None:
    """Step over the AlgorithmIdentifier and into the wrapped RSAPrivateKey."""
    reader.expect(TAG_SEQUENCE)
    reader.skip(reader.expect(TAG_OID))
    if reader.peek() == TAG_NULL:
        reader.skip(reader.expect(TAG_NULL))
    reader.expect(TAG_OCTET_STRING)
    reader.expect(TAG_SEQUENCE)
    reader.read_integer()


def decode_private_key_der(der: bytes) -> tuple[bytes, bytes]:
    """Return ``(modulus, private_exponent)`` big-endian bytes from DER."""
    reader = _Reader(der)
    reader.expect(TAG_SEQUENCE)
    reader.read_integer()
    if reader.peek() == TAG_SEQUENCE:
        _skip_pkcs8_header(reader)
    modulus = reader.read_integer()
    reader.read_integer()  # public exponent
    private_exponent = reader.read_integer()
    return modulus, private_exponent


def decode_private_key(pem: str) -> tuple[bytes, bytes]:
    """Return ``(modulus, private_exponent)`` big-endian bytes from PEM text."""
    return decode_private_key_der(pem_to_der(pem))


def load_key_material(pem: str) -> RSAKeyMaterial:
    """Parse PEM text into big-integer RSA key material."""
    modulus, private_exponent = decode_private_key(pem)
    return RSAKeyMaterial(
        modulus=BigUInt.from_bytes(modulus),
        private_exponent=BigUInt.from_bytes(private_exponent),
    )
