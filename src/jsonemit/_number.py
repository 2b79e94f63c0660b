"""
Exact formatting of coefficient/exponent decimals as JSON number tokens.

Numbers never pass through binary floating point here. Integral values
(non-negative exponent) are written as plain digits; values with a
negative exponent are written with the fewest digits that represent them
exactly, switching to exponent notation outside [0.1, 10**7).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Final

from ._profile import ProfileContext

# Decimal point positions rendered in fixed notation; others use exponents
FIXED_MIN_POINT: Final = 0
FIXED_MAX_POINT: Final = 7


def _digits(n: int) -> str:
    """
    Renders an int in decimal.

    Decimal conversion is not subject to sys.get_int_max_str_digits(), so
    coefficients of any length render.
    """
    return str(Decimal(n))


def _shift_digits(coefficient: int, exponent: int) -> str:
    """Renders coefficient * 10**exponent for exponent >= 0."""
    if coefficient == 0:
        return "0"
    # Appending zeros avoids building the full int
    return _digits(coefficient) + "0" * exponent


def _significant_digits(magnitude: int, exponent: int) -> tuple[str, int]:
    """
    Strips trailing zeros from ``magnitude``.

    Returns the significant digit string and the decimal point position
    relative to its first digit, so that the value equals
    ``0.<digits> * 10**point``. Zero is ``("0", 0)``.
    """
    if magnitude == 0:
        return "0", 0
    digits = _digits(magnitude)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, len(stripped) + exponent


def _fixed(digits: str, point: int) -> str:
    if point <= 0:
        return "0." + "0" * -point + digits
    whole = digits[:point].ljust(point, "0")
    fraction = digits[point:] or "0"
    return f"{whole}.{fraction}"


def _exponential(digits: str, point: int) -> str:
    head, tail = digits[0], digits[1:] or "0"
    return f"{head}.{tail}e{point - 1}"


def _fractional(coefficient: int, exponent: int) -> str:
    """Renders coefficient * 10**exponent for exponent < 0."""
    digits, point = _significant_digits(abs(coefficient), exponent)
    if FIXED_MIN_POINT <= point <= FIXED_MAX_POINT:
        body = _fixed(digits, point)
    else:
        body = _exponential(digits, point)
    return "-" + body if coefficient < 0 else body


def format_number(coefficient: int, exponent: int = 0) -> str:
    """
    Formats ``coefficient * 10**exponent`` as a JSON number token.

    >>> format_number(123, 2)
    '12300'
    >>> format_number(15, -1)
    '1.5'
    >>> format_number(-5, -2)
    '-5.0e-2'
    """
    with ProfileContext("format_number"):
        if exponent >= 0:
            return _shift_digits(coefficient, exponent)
        return _fractional(coefficient, exponent)
