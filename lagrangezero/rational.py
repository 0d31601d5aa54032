from __future__ import annotations  # noqa: F407

from gmpy2 import gcd, mpz

from .exceptions import DivideByZero
from .utils.typecheck import TypeCheck


def _as_rational(value):
    if isinstance(value, BigRational):
        return value
    return BigRational(value)


class BigRational(object):
    """Exact fraction over arbitrary precision integers.

    Values are always kept in lowest terms with a positive denominator, so
    two equal fractions always have identical numerator and denominator.
    Instances are immutable; every operation returns a new value.

    >>> BigRational(6, -4)
    BigRational(-3, 2)
    >>> str(BigRational(1, 3) + BigRational(2, 3))
    '1'
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator, denominator=1):
        if any(
            isinstance(part, bool) or not isinstance(part, (int, mpz))
            for part in (numerator, denominator)
        ):
            raise TypeError(
                f"BigRational needs integer parts, got "
                f"({type(numerator).__name__}, {type(denominator).__name__})"
            )

        n, d = mpz(numerator), mpz(denominator)
        if d == 0:
            raise DivideByZero(f"Zero denominator in {n}/{d}")
        if d < 0:
            n, d = -n, -d

        g = gcd(n, d)
        self._numerator = n // g
        self._denominator = d // g

    @classmethod
    def make(cls, numerator, denominator=1):
        return cls(numerator, denominator)

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    def is_integer(self):
        return self._denominator == 1

    @TypeCheck(arithmetic=True)
    def __add__(self, other: (int, mpz, BigRational)):
        other = _as_rational(other)
        return BigRational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    __radd__ = __add__

    @TypeCheck(arithmetic=True)
    def __sub__(self, other: (int, mpz, BigRational)):
        other = _as_rational(other)
        return BigRational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    @TypeCheck(arithmetic=True)
    def __rsub__(self, other: (int, mpz)):
        return _as_rational(other) - self

    @TypeCheck(arithmetic=True)
    def __mul__(self, other: (int, mpz, BigRational)):
        other = _as_rational(other)
        return BigRational(
            self._numerator * other._numerator, self._denominator * other._denominator
        )

    __rmul__ = __mul__

    @TypeCheck(arithmetic=True)
    def __truediv__(self, other: (int, mpz, BigRational)):
        other = _as_rational(other)
        if other._numerator == 0:
            raise DivideByZero(f"Cannot divide {self} by zero")

        # (a/b) / (c/d) = (a*d) / (b*c)
        numerator = self._numerator * other._denominator
        denominator = self._denominator * other._numerator
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return BigRational(numerator, denominator)

    @TypeCheck(arithmetic=True)
    def __rtruediv__(self, other: (int, mpz)):
        return _as_rational(other) / self

    def __neg__(self):
        return BigRational(-self._numerator, self._denominator)

    def __eq__(self, other):
        if isinstance(other, BigRational):
            return (
                self._numerator == other._numerator
                and self._denominator == other._denominator
            )
        if isinstance(other, (int, mpz)):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self):
        if self._denominator == 1:
            return hash(int(self._numerator))
        return hash((int(self._numerator), int(self._denominator)))

    def __bool__(self):
        return self._numerator != 0

    def format(self):
        """Decimal string of the value, or ``numerator/denominator`` when it
        is not an integer.
        """
        if self.is_integer():
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    __str__ = format

    def __repr__(self):
        return f"BigRational({self._numerator}, {self._denominator})"


ZERO = BigRational(0)
