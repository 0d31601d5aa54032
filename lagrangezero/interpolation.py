import logging

from .exceptions import DuplicateAbscissa, InsufficientPoints
from .rational import BigRational, ZERO


def check_distinct(xs):
    seen = set()
    for x in xs:
        if x in seen:
            raise DuplicateAbscissa(x)
        seen.add(x)


def lagrange_basis_at_zero(xs, i):
    """Compute the Lagrange basis coefficient L_i(0) exactly.

    xs = list of x-coordinates.
    Returns prod_{j!=i} (0 - x_j) / (x_i - x_j) as a BigRational.
    """
    xi = xs[i]
    basis = BigRational(1)
    for j, xj in enumerate(xs):
        if j == i:
            continue
        basis = basis * BigRational(-xj) / BigRational(xi - xj)
    return basis


def interpolate_at_zero(points):
    """Evaluate the interpolating polynomial through ``points`` at x = 0.

    f(0) = sum_i y_i * prod_{j!=i} (-x_j) / (x_i - x_j)

    Every step is exact fraction arithmetic, so for points on a polynomial
    with integer coefficients the result is an integer valued BigRational.
    No check is made that the points actually lie on one polynomial of
    degree len(points) - 1.
    """
    if not points:
        raise InsufficientPoints("Need at least one point")

    xs, ys = zip(*points)
    check_distinct(xs)

    secret = ZERO
    for i, yi in enumerate(ys):
        secret += BigRational(yi) * lagrange_basis_at_zero(xs, i)

    logging.debug("Interpolated f(0) = %s from %d points", secret, len(xs))
    return secret
