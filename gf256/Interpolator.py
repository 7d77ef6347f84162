"""
Lagrange Interpolation of Shares over GF(2^8)

A share is one sample point (x, [y_0, y_1, ..., y_m-1]) of m hidden
polynomials of degree n-1. Any n shares determine all m polynomials, so
their value at any other x can be rebuilt, including the secret at x = 0.

Lagrange basis coefficient of share s at destination d:

    L_s(d) = prod_{t != s} (d - x_t) / (x_s - x_t)

All the numerators share the factor P = prod_t (x_t - d), so

    log L_s(d) = log P - log(x_s - d) - sum_{t != s} log(x_s - x_t)

which only needs additions of logarithms: O(n^2) for all coefficients
and O(n*m) for the output, instead of O(n^2 * m) multiplications.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np

from .GaloisField import GF, ILOGS, LOGS, ByteLike, as_gf
from .errors import DuplicateXError, MismatchedSharesError, TooFewSharesError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """
    Sample point of one or more polynomials over GF(2^8).

    Attributes:
        x: Evaluation point
        ys: One value per polynomial slot

    Example:
        >>> share = Share.from_bytes(1, b'secret')
        >>> assert share.ys[0] == GF(ord('s'))
        >>> assert share.y_bytes() == b'secret'
    """

    x: GF
    ys: Tuple[GF, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'x', as_gf(self.x))
        object.__setattr__(self, 'ys', tuple(as_gf(y) for y in self.ys))

    @classmethod
    def from_bytes(cls, x: ByteLike, data: Union[bytes, bytearray]) -> 'Share':
        """Build a share whose y-values are the bytes of data."""
        return cls(as_gf(x), tuple(GF(b) for b in data))

    def y_bytes(self) -> bytes:
        """Return the y-values as bytes."""
        return bytes(y.bits for y in self.ys)


def interpolate(shares: Sequence[Share], dest_x: ByteLike) -> Share:
    """
    Evaluate the polynomials defined by shares at dest_x.

    If one of the shares already sits at dest_x, that share is returned
    as is.

    Args:
        shares: At least 2 shares with distinct x and equal-length ys
        dest_x: Point to evaluate at

    Returns:
        Share at dest_x holding one interpolated value per slot

    Raises:
        TooFewSharesError: If fewer than 2 shares are given
        MismatchedSharesError: If the shares have different numbers of ys
        DuplicateXError: If two shares have the same x
    """
    shares = list(shares)
    dest_x = as_gf(dest_x)

    if len(shares) < 2:
        raise TooFewSharesError(
            f"Need at least 2 shares to interpolate, got {len(shares)}")

    size = len(shares[0].ys)
    for share in shares[1:]:
        if len(share.ys) != size:
            raise MismatchedSharesError(
                f"Shares have {size} and {len(share.ys)} y-values")

    logger.debug("Interpolating %d shares of %d slots at %r",
                 len(shares), size, dest_x)

    # log P, where P is the product of all (x_t - d)
    dest_logs: List[int] = []
    for share in shares:
        diff = share.x - dest_x
        if not diff:
            logger.debug("Share at %r already sits at destination", share.x)
            return share
        dest_logs.append(diff.log())
    log_p = sum(dest_logs)

    result = np.zeros(size, dtype=np.uint8)

    for i, share in enumerate(shares):
        b = log_p - dest_logs[i]
        for j, other in enumerate(shares):
            if j == i:
                continue
            diff = share.x - other.x
            if not diff:
                raise DuplicateXError(
                    f"Two shares have the same x-coordinate {share.x!r}")
            b -= diff.log()

        # log(0) is undefined and zero ys contribute nothing
        ys = np.frombuffer(share.y_bytes(), dtype=np.uint8)
        nonzero = ys != 0
        if not nonzero.any():
            continue

        k = (LOGS[ys[nonzero] - 1].astype(np.int64) + b) % GF.MAX
        result[nonzero] ^= ILOGS[k]

    return Share(dest_x, tuple(GF(int(y)) for y in result))


def recover(shares: Iterable[Share], x: ByteLike = GF()) -> bytes:
    """
    Rebuild the secret bytes stored at x (0 by convention).

    Args:
        shares: At least 2 shares with distinct x and equal-length ys
        x: Coordinate of the secret

    Returns:
        Interpolated y-values at x as bytes
    """
    return interpolate(list(shares), x).y_bytes()
