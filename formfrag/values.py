"""
Field values accepted by editable elements.

A field value is one of a closed set of types: numbers (int, float, Decimal)
or text. Numeric fields narrow this further to numbers and numeric strings,
which this module recognises and converts to ``Decimal`` for formatting.
"""

from __future__ import annotations

from decimal import Decimal
import re
import sys
from typing import Union

FieldValue = Union[int, float, Decimal, str]
Number = Union[int, float, Decimal]

# Optional surrounding whitespace, sign, digits with an optional fraction
# (or a bare fraction) and an optional exponent.
_NUMERIC_RE = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")
_MAX_MAGNITUDE = Decimal(sys.float_info.max)


def is_numeric(value: object) -> bool:
    """Return True for finite numbers and strings that spell one.

    ``bool`` is rejected even though it subclasses ``int``. Magnitudes
    beyond the largest float are rejected as well, so every accepted value
    can be formatted.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        if not _NUMERIC_RE.match(value):
            return False
    elif not isinstance(value, (int, float, Decimal)):
        return False
    number = to_decimal(value)
    # copy_abs() ignores the context, so huge exponents cannot overflow here
    return number.is_finite() and number.copy_abs() <= _MAX_MAGNITUDE


def to_decimal(value: Number | str) -> Decimal:
    """Convert a numeric value to ``Decimal`` without binary float noise.

    Floats go through their shortest ``repr`` so ``1.005`` stays ``1.005``
    instead of ``1.00499999...``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        return Decimal(value.strip())
    return Decimal(value)


__all__ = ["FieldValue", "Number", "is_numeric", "to_decimal"]
