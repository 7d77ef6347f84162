"""
Galois Field GF(2^8) Arithmetic

Byte-oriented secret sharing and erasure codes work over GF(2^8) with
the AES reducing polynomial p(x) = x^8 + x^4 + x^3 + x + 1 = 0x11B.

In GF(2^8):
- Addition and subtraction are the same operation: XOR
- Multiplication and division use log/antilog tables
- Each non-zero element can be represented as g^i for generator g = 3

The multiplicative group has 255 elements: {1, g, g^2, ..., g^254}
where g^255 = 1 (cyclic). Zero has no logarithm and no inverse.

Reference: FIPS-197 Section 4.2
"""

import operator
from dataclasses import dataclass
from math import gcd
from typing import Tuple, Union

import numpy as np

from .errors import DivisionByZeroError, InvalidOperandError


@dataclass(frozen=True, order=True, repr=False)
class GF:
    """
    Element of GF(2^8), stored as a single byte.

    The ordering of elements is the ordering of their byte values. It has
    no algebraic meaning and only exists for sorting and containers.

    Attributes:
        bits: Byte value of the element (0-255)

    Example:
        >>> a, b = GF(0x53), GF(0xCA)
        >>> assert (a * b) / b == a
        >>> assert a + a == GF(0)
        >>> assert a ** -1 == GF(1) / a
    """

    bits: int = 0

    # Reducing polynomial: x^8 + x^4 + x^3 + x + 1
    POLYNOMIAL = 0x11B

    # Generator of the multiplicative group
    GENERATOR = 0x03

    # Size of the multiplicative group (every element except zero)
    MAX = 255

    def __post_init__(self):
        bits = self.bits
        if isinstance(bits, (bytes, bytearray)):
            if len(bits) != 1:
                raise ValueError(f"Expected a single byte, got {len(bits)} bytes")
            bits = bits[0]
        else:
            bits = operator.index(bits)
            if not 0 <= bits <= self.MAX:
                raise ValueError(f"Byte value out of range: {bits}")

        object.__setattr__(self, 'bits', bits)

    def __repr__(self) -> str:
        return f"GF({self.bits})"

    def __int__(self) -> int:
        return self.bits

    def __bytes__(self) -> bytes:
        return bytes([self.bits])

    def __bool__(self) -> bool:
        return self.bits != 0

    def is_zero(self) -> bool:
        """Indicate whether this is the zero element."""
        return self.bits == 0

    # Every element is its own opposite
    def __pos__(self) -> 'GF':
        return self

    def __neg__(self) -> 'GF':
        return self

    def __add__(self, other: 'GF') -> 'GF':
        """
        Add two field elements.

        In GF(2^n), addition is XOR. Subtraction is the same operation.
        """
        if not isinstance(other, GF):
            return NotImplemented
        return GF(self.bits ^ other.bits)

    __sub__ = __add__

    def __mul__(self, other: 'GF') -> 'GF':
        """
        Multiply two field elements.

        Uses log/antilog tables: a * b = exp(log(a) + log(b))
        """
        if not isinstance(other, GF):
            return NotImplemented
        if not self or not other:
            return GF()

        c = int(LOGS[self.bits - 1]) + int(LOGS[other.bits - 1])
        if c >= self.MAX:
            c -= self.MAX

        assert 0 <= c < self.MAX
        return GF(int(ILOGS[c]))

    def __truediv__(self, other: 'GF') -> 'GF':
        """
        Divide two field elements.

        a / b = exp(log(a) - log(b))

        Raises:
            DivisionByZeroError: If other is zero
        """
        if not isinstance(other, GF):
            return NotImplemented
        if not other:
            raise DivisionByZeroError("Division by zero in GF(2^8)")
        if not self:
            return GF()

        c = int(LOGS[self.bits - 1]) - int(LOGS[other.bits - 1])
        if c < 0:
            c += self.MAX

        assert 0 <= c < self.MAX
        return GF(int(ILOGS[c]))

    def __pow__(self, exponent: int, modulo=None) -> 'GF':
        """
        Raise field element to an integer power.

        a^n = exp(n * log(a)). The exponent can be negative if the
        element is not zero.

        Args:
            exponent: Power, reduced modulo 255

        Returns:
            a^n in GF(2^8)

        Raises:
            InvalidOperandError: If the element is zero and exponent <= 0
        """
        if modulo is not None:
            return NotImplemented
        exponent = operator.index(exponent)

        if not self:
            if exponent <= 0:
                raise InvalidOperandError(
                    f"Zero raised to non-positive power {exponent}")
            return GF()

        exponent %= self.MAX
        if exponent == 0:
            return GF(1)

        c = (exponent * int(LOGS[self.bits - 1])) % self.MAX
        assert 0 <= c < self.MAX
        return GF(int(ILOGS[c]))

    def log(self) -> int:
        """
        Get i where g^i = a (logarithm lookup).

        Returns:
            Power i in [0, 255)

        Raises:
            InvalidOperandError: If the element is zero
        """
        if not self:
            raise InvalidOperandError("Logarithm of zero is undefined")
        return int(LOGS[self.bits - 1])

    @classmethod
    def exp(cls, i: int) -> 'GF':
        """
        Get g^i (antilogarithm lookup).

        Args:
            i: Power, any integer (normalized modulo 255)

        Returns:
            g^i in GF(2^8)
        """
        return cls(int(ILOGS[operator.index(i) % cls.MAX]))

    def inverse(self) -> 'GF':
        """
        Find multiplicative inverse of field element.

        Raises:
            DivisionByZeroError: If the element is zero
        """
        return GF(1) / self

    def order(self) -> int:
        """
        Multiplicative order: smallest n > 0 with a^n = 1.

        Always divides 255.

        Raises:
            InvalidOperandError: If the element is zero
        """
        return self.MAX // gcd(self.log(), self.MAX)


def _build_tables() -> Tuple[np.ndarray, np.ndarray]:
    """
    Build logarithm and antilogarithm tables of the generator.

    logs[v - 1] = i where g^i = v
    ilogs[i] = g^i

    Both tables are frozen once built.

    Returns:
        Tuple of (logs, ilogs), uint8 arrays of length 255
    """
    logs = np.zeros(GF.MAX, dtype=np.uint8)
    ilogs = np.zeros(GF.MAX, dtype=np.uint8)

    x = 1
    for i in range(GF.MAX):
        ilogs[i] = x
        logs[x - 1] = i

        # Multiply by g = 3: x * 3 = (x << 1) ^ x
        x ^= x << 1
        if x & 0x100:  # Reduce if overflow
            x ^= GF.POLYNOMIAL

    assert x == 1, "generator must have order 255"

    logs.flags.writeable = False
    ilogs.flags.writeable = False
    return logs, ilogs


LOGS, ILOGS = _build_tables()


def multiply_slow(a: GF, b: GF) -> GF:
    """
    Multiply using bit-by-bit method.

    Carry-less polynomial multiplication with reduction by 0x11B. Serves
    as reference for the table-based multiplication.

    Args:
        a: First operand
        b: Second operand

    Returns:
        Product in GF(2^8)
    """
    x, y = a.bits, b.bits
    result = 0

    while y:
        if y & 1:
            result ^= x

        # Multiply x by the polynomial x (shift left)
        x <<= 1
        if x & 0x100:
            x ^= GF.POLYNOMIAL

        y >>= 1

    return GF(result)


def power_slow(a: GF, exponent: int) -> GF:
    """
    Raise to a power by repeated squaring over multiply_slow.

    Negative exponents are normalized modulo 255 first.

    Raises:
        InvalidOperandError: If a is zero and exponent <= 0
    """
    if not a:
        if exponent <= 0:
            raise InvalidOperandError(
                f"Zero raised to non-positive power {exponent}")
        return GF()

    exponent %= GF.MAX
    result = GF(1)
    base = a

    while exponent:
        if exponent & 1:
            result = multiply_slow(result, base)
        base = multiply_slow(base, base)
        exponent >>= 1

    return result


ByteLike = Union[GF, int]


def as_gf(value: ByteLike) -> GF:
    """Coerce a byte value to a field element."""
    return value if isinstance(value, GF) else GF(value)
