from gmpy2 import mpz


class LagrangeZeroError(Exception):
    """Base exception class."""


class DivideByZero(LagrangeZeroError, ZeroDivisionError):
    """Raised when a fraction is built or divided with a zero divisor."""


class DuplicateAbscissa(DivideByZero):
    """Raised when two points used for interpolation share the same x."""

    def __init__(self, x):
        super().__init__(f"Duplicate x value {mpz(x)} among interpolation points")
        self.x = x


class DecodeError(LagrangeZeroError, ValueError):
    """Base class for base-N decoding errors."""


class UnsupportedBase(DecodeError):
    """Raised for a base outside [2, 36]."""


class InvalidDigit(DecodeError):
    """Raised for a character that is not in the base-36 alphabet."""


class DigitOutOfRange(DecodeError):
    """Raised for a valid digit whose value is not below the base."""


class InputError(LagrangeZeroError, ValueError):
    """Base class for malformed point sets."""


class InvalidThreshold(InputError):
    """Raised when the threshold k is missing, not an integer or below 2."""


class InsufficientPoints(InputError):
    """Raised when fewer usable points than the threshold are available."""


class InvalidInput(InputError):
    """Raised when the input document cannot be turned into points."""
