"""
gf256 - GF(2^8) Arithmetic and Share Interpolation

Arithmetic core for byte-oriented threshold schemes (Shamir secret
sharing, erasure codes). Share generation, encoding and distribution
are left to the caller.

Modules:
    - GaloisField: GF element type, log/antilog tables, reference
      implementations of multiplication and power
    - Interpolator: Share type and Lagrange interpolation
    - errors: Exception hierarchy
"""

__version__ = "0.1.0"
__author__ = "gf256 Contributors"

from .errors import (
    GF256Error,
    InvalidOperandError,
    DivisionByZeroError,
    InterpolationError,
    TooFewSharesError,
    MismatchedSharesError,
    DuplicateXError,
)
from .GaloisField import GF, multiply_slow, power_slow
from .Interpolator import Share, interpolate, recover

__all__ = [
    # Field
    'GF', 'multiply_slow', 'power_slow',

    # Interpolation
    'Share', 'interpolate', 'recover',

    # Errors
    'GF256Error', 'InvalidOperandError', 'DivisionByZeroError',
    'InterpolationError', 'TooFewSharesError', 'MismatchedSharesError',
    'DuplicateXError',
]
