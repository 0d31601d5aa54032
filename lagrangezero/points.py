import logging
from collections import namedtuple

from gmpy2 import mpz

from .exceptions import InsufficientPoints, InvalidThreshold
from .utils.typecheck import TypeCheck

MIN_THRESHOLD = 2

Point = namedtuple("Point", ["x", "y"])


def check_threshold(k):
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidThreshold(f"Threshold k must be an integer, got {k!r}")
    if k < MIN_THRESHOLD:
        raise InvalidThreshold(f"Threshold k must be >= {MIN_THRESHOLD}, got {k}")
    return k


@TypeCheck()
def select_points(points: (list, tuple), k):
    """Pick the k points with the smallest x values.

    Any k points on the polynomial give the same constant term, so the
    choice only has to be reproducible: points are ordered by ascending x
    and the first k are kept. Repeated x values are not detected here.

    args:
        points (list): (x, y) pairs.
        k (int): Threshold, at least 2.

    outputs:
        List of exactly k Points sorted by x.
    """
    check_threshold(k)
    if len(points) < k:
        raise InsufficientPoints(f"Not enough points. Have {len(points)}, need k={k}")

    chosen = [Point(*p) for p in sorted(points, key=lambda p: p[0])[:k]]
    logging.debug(
        "Selected x values [%s] out of %d points",
        ", ".join(str(mpz(p.x)) for p in chosen),
        len(points),
    )
    return chosen


class PointCollection(object):
    """Decoded points together with the threshold needed to recover f(0)."""

    def __init__(self, points, k):
        self.points = tuple(Point(*p) for p in points)
        self.k = check_threshold(k)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return f"PointCollection(k={self.k}, points={list(self.points)})"

    def select(self):
        return select_points(self.points, self.k)
