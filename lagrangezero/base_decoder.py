"""Decoding of digit strings written in bases 2 through 36.

Digits are ``0-9`` followed by ``a-z`` (case-insensitive), most significant
digit first. There is no sign and no prefix such as ``0x``; the decoded
value is always a non-negative integer of arbitrary size.
"""
from gmpy2 import mpz

from .exceptions import DigitOutOfRange, InvalidDigit, UnsupportedBase
from .utils.typecheck import TypeCheck

MIN_BASE = 2
MAX_BASE = 36

_DIGIT_VALUES = {c: i for i, c in enumerate("0123456789abcdefghijklmnopqrstuvwxyz")}


def digit_value(char):
    """Value of a single base-36 digit, or InvalidDigit."""
    if char.isascii() and char.lower() in _DIGIT_VALUES:
        return _DIGIT_VALUES[char.lower()]
    raise InvalidDigit(f"Invalid digit {char!r}")


def check_base(base):
    if isinstance(base, bool) or not isinstance(base, int):
        raise UnsupportedBase(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise UnsupportedBase(
            f"Unsupported base {base}, must be in [{MIN_BASE}, {MAX_BASE}]"
        )
    return base


@TypeCheck()
def decode(digits: str, base: int):
    """Decode ``digits`` in ``base`` to an integer.

    args:
        digits (str): Digit string; surrounding whitespace is ignored.
        base (int): Radix in [2, 36].

    outputs:
        The decoded value as an ``mpz``.

    >>> decode("ff", 16)
    mpz(255)
    """
    check_base(base)

    radix = mpz(base)
    acc = mpz(0)
    for char in digits.strip():
        value = digit_value(char)
        if value >= base:
            raise DigitOutOfRange(f"Digit {char!r} not valid for base {base}")
        acc = acc * radix + value
    return acc
