"""Unsigned arbitrary-precision integers built from 32-bit words.

Values are immutable and always canonical: the word tuple is stored least
significant word first and never carries high zero words beyond a length of
one, so zero is exactly ``(0,)``. Every operation returns a new value and
leaves its operands untouched.
"""

import functools
from collections.abc import Iterable
from typing import Self

WORD_BITS = 32
WORD_BASE = 1 << WORD_BITS
WORD_MASK = WORD_BASE - 1
WORD_BYTES = WORD_BITS // 8


def _trim(words: list[int]) -> tuple[int, ...]:
    """Drop high zero words, keeping at least one word."""
    end = len(words)
    while end > 1 and words[end - 1] == 0:
        end -= 1
    if end == 0:
        return (0,)
    return tuple(words[:end])


@functools.total_ordering
class BigUInt:
    """Immutable non-negative integer stored as little-endian 32-bit words."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[int] = (0,)) -> None:
        checked = list(words)
        for word in checked:
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"Word out of range: {word!r}")
        self._words = _trim(checked)

    @classmethod
    def _from_words(cls, words: list[int]) -> Self:
        """Build from words already known to be in range."""
        value = cls.__new__(cls)
        value._words = _trim(words)
        return value

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Decode a big-endian unsigned byte string."""
        words = []
        end = len(data)
        while end > 0:
            start = max(end - WORD_BYTES, 0)
            words.append(int.from_bytes(data[start:end], "big"))
            end = start
        return cls._from_words(words)

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Convert a non-negative Python int."""
        if value < 0:
            raise ValueError("BigUInt cannot hold a negative value")
        words = []
        while value:
            words.append(value & WORD_MASK)
            value >>= WORD_BITS
        return cls._from_words(words)

    @property
    def words(self) -> tuple[int, ...]:
        return self._words

    def to_int(self) -> int:
        """Convert back to a Python int."""
        value = 0
        for word in reversed(self._words):
            value = (value << WORD_BITS) | word
        return value

    def to_bytes(self, length: int | None = None) -> bytes:
        """Encode big-endian, left-padded with zeros to ``length`` if given."""
        raw = b"".join(word.to_bytes(WORD_BYTES, "big") for word in reversed(self._words))
        raw = raw.lstrip(b"\x00") or b"\x00"
        if length is None:
            return raw
        if len(raw) > length:
            raise OverflowError(f"Value needs {len(raw)} bytes, only {length} allowed")
        return raw.rjust(length, b"\x00")

    def bit_length(self) -> int:
        return (len(self._words) - 1) * WORD_BITS + self._words[-1].bit_length()

    def is_zero(self) -> bool:
        return self._words == (0,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigUInt):
            return NotImplemented
        return self._words == other._words

    def __lt__(self, other: "BigUInt") -> bool:
        if not isinstance(other, BigUInt):
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"BigUInt(0x{self.to_bytes().hex()})"


ZERO = BigUInt()
ONE = BigUInt((1,))


def compare(a: BigUInt, b: BigUInt) -> int:
    """Three-way comparison: word count first, then most significant word first."""
    a_words, b_words = a.words, b.words
    if len(a_words) != len(b_words):
        return -1 if len(a_words) < len(b_words) else 1
    for i in range(len(a_words) - 1, -1, -1):
        if a_words[i] != b_words[i]:
            return -1 if a_words[i] < b_words[i] else 1
    return 0


def subtract(a: BigUInt, b: BigUInt) -> BigUInt:
    """Return ``a - b``; ``a`` must not be smaller than ``b``."""
    if compare(a, b) < 0:
        raise ValueError("subtract requires a >= b")
    b_words = b.words
    result = []
    borrow = 0
    for i, word in enumerate(a.words):
        diff = word - (b_words[i] if i < len(b_words) else 0) - borrow
        if diff < 0:
            diff += WORD_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return BigUInt._from_words(result)


def multiply(a: BigUInt, b: BigUInt) -> BigUInt:
    """Schoolbook product with 64-bit word-pair intermediates."""
    if a.is_zero() or b.is_zero():
        return ZERO
    a_words, b_words = a.words, b.words
    result = [0] * (len(a_words) + len(b_words))
    for i, a_word in enumerate(a_words):
        if a_word == 0:
            continue
        carry = 0
        k = i
        for b_word in b_words:
            product = a_word * b_word + result[k] + carry
            result[k] = product & WORD_MASK
            carry = product >> WORD_BITS
            k += 1
        result[k] = carry
    return BigUInt._from_words(result)


def _shift_left(words: tuple[int, ...], shift: int, size: int) -> list[int]:
    """Shift left by ``shift`` (< WORD_BITS) bits into a list of ``size`` words."""
    out = [0] * size
    carry = 0
    for i, word in enumerate(words):
        value = (word << shift) | carry
        out[i] = value & WORD_MASK
        carry = value >> WORD_BITS
    if len(words) < size:
        out[len(words)] = carry
    return out


def _shift_right(words: list[int], shift: int, size: int) -> list[int]:
    """Shift right by ``shift`` (< WORD_BITS) bits; ``words`` holds size + 1 words."""
    return [
        ((words[i] >> shift) | (words[i + 1] << (WORD_BITS - shift))) & WORD_MASK
        for i in range(size)
    ]


def _short_remainder(words: tuple[int, ...], divisor: int) -> BigUInt:
    remainder = 0
    for word in reversed(words):
        remainder = ((remainder << WORD_BITS) | word) % divisor
    return BigUInt._from_words([remainder])


def reduce(a: BigUInt, m: BigUInt) -> BigUInt:
    """Return ``a mod m`` by word-level long division.

    The divisor is normalised so its top word has the high bit set, then one
    quotient word is retired per pass from the most significant end. The main
    loop runs exactly ``len(a) - len(m) + 1`` times and every pass leaves the
    running remainder below ``m`` shifted to that position, so it always
    terminates with ``0 <= result < m``.
    """
    if m.is_zero():
        raise ZeroDivisionError("modulus must be non-zero")
    if compare(a, m) < 0:
        return a
    divisor = m.words
    n = len(divisor)
    if n == 1:
        return _short_remainder(a.words, divisor[0])

    shift = WORD_BITS - divisor[-1].bit_length()
    v = _shift_left(divisor, shift, n)
    u = _shift_left(a.words, shift, len(a.words) + 1)
    v_top, v_next = v[-1], v[-2]

    for j in range(len(u) - n - 1, -1, -1):
        numerator = (u[j + n] << WORD_BITS) | u[j + n - 1]
        qhat, rhat = divmod(numerator, v_top)
        # qhat overshoots by at most two
        while qhat >= WORD_BASE or qhat * v_next > ((rhat << WORD_BITS) | u[j + n - 2]):
            qhat -= 1
            rhat += v_top
            if rhat >= WORD_BASE:
                break
        if qhat == 0:
            continue

        borrow = 0
        carry = 0
        for i in range(n):
            product = qhat * v[i] + carry
            carry = product >> WORD_BITS
            diff = u[i + j] - (product & WORD_MASK) - borrow
            u[i + j] = diff & WORD_MASK
            borrow = 1 if diff < 0 else 0
        diff = u[j + n] - carry - borrow
        u[j + n] = diff & WORD_MASK

        if diff < 0:
            # qhat was one too large: add the divisor back once
            carry = 0
            for i in range(n):
                total = u[i + j] + v[i] + carry
                u[i + j] = total & WORD_MASK
                carry = total >> WORD_BITS
            u[j + n] = (u[j + n] + carry) & WORD_MASK

    return BigUInt._from_words(_shift_right(u[: n + 1], shift, n))


def mod_pow(base: BigUInt, exponent: BigUInt, modulus: BigUInt) -> BigUInt:
    """Compute ``base ** exponent mod modulus`` by square-and-multiply.

    Exponent bits are consumed from the least significant end. The running
    power of the base is squared on every bit, set or not.
    """
    if modulus.is_zero():
        raise ZeroDivisionError("modulus must be non-zero")
    result = reduce(ONE, modulus)
    power = reduce(base, modulus)
    for word in exponent.words:
        for bit in range(WORD_BITS):
            if (word >> bit) & 1:
                result = reduce(multiply(result, power), modulus)
            power = reduce(multiply(power, power), modulus)
    return result
