"""
Exceptions raised by GF(2^8) arithmetic and share interpolation.

Field errors subclass ValueError (and ZeroDivisionError for division),
so callers that only know the builtin exceptions still catch them.
"""


class GF256Error(Exception):
    """Base class for gf256 errors."""


# Field operations
class InvalidOperandError(GF256Error, ValueError):
    """Operand outside the domain of a field operation (e.g. log of zero)."""


class DivisionByZeroError(InvalidOperandError, ZeroDivisionError):
    """Division by the zero element, or inverse of zero."""


# Interpolation preconditions
class InterpolationError(GF256Error, ValueError):
    """Shares passed to interpolate() violate its preconditions."""


class TooFewSharesError(InterpolationError):
    pass


class MismatchedSharesError(InterpolationError):
    pass


class DuplicateXError(InterpolationError):
    pass
