"""Formatting integers and floating-point numbers in bases 2 to 36."""

from __future__ import annotations

import math
from fractions import Fraction

from .chars import numeral

DEFAULT_PRECISION = 6
"""Fractional digits shown when no precision is requested."""


def _valid_base(base: int) -> int:
    return base if 2 <= base <= 36 else 10


def _digits(value: int, base: int) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, digit = divmod(value, base)
        out.append(numeral(digit))
    return "".join(reversed(out))


def format_integer(value: int, base: int = 10, pad_size: int = 0) -> str:
    """Write an integer in ``base`` with uppercase digits.

    Bases outside 2-36 are treated as 10.  Zeroes are added after any sign
    until the result is ``pad_size`` characters long.
    """
    base = _valid_base(base)
    sign = "-" if value < 0 else ""
    digits = _digits(abs(int(value)), base)
    return sign + digits.rjust(pad_size - len(sign), "0")


def format_float(value: float, base: int = 10, precision: int = 0, force: bool = False) -> str:
    """Write a number in ``base`` with a limited number of fractional digits.

    A precision below 1 means up to ``DEFAULT_PRECISION`` digits.  The last
    digit is rounded half up.  Trailing zeroes are dropped, together with
    the point when nothing follows it, unless ``force`` is set and a
    precision is given, in which case exactly that many digits are shown.
    """
    base = _valid_base(base)
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"

    digits = precision if precision >= 1 else DEFAULT_PRECISION
    unit = base**digits
    scaled = math.floor(Fraction(abs(value)) * unit + Fraction(1, 2))
    whole, fraction = divmod(scaled, unit)

    fraction_text = _digits(fraction, base).rjust(digits, "0")
    if not (force and precision >= 1):
        fraction_text = fraction_text.rstrip("0")

    text = _digits(whole, base)
    if fraction_text:
        text += "." + fraction_text
    return "-" + text if value < 0 and scaled else text


def format_precision(value: float, digits: int) -> str:
    """Write a decimal number with exactly ``digits`` fractional digits."""
    return format_float(value, 10, digits, True)