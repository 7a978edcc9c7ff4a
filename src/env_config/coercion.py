# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Coercion of raw environment strings into richer Python values.

Applied by the resolver only when coercion is enabled. The first matching
rule wins:

- ``"null"`` becomes ``None``
- ``"undefined"`` becomes :data:`UNDEFINED` (treated as an unset value)
- ``"true"`` / ``"false"`` become booleans
- numeric literals become ``int`` or ``float``
- anything else, including the empty string, is returned unchanged

Numeric literals follow JavaScript ``Number()`` literal rules: hexadecimal,
octal and binary prefixes, decimals, exponents, surrounding whitespace,
``NaN`` and ``Infinity``. Values with a leading zero followed by another
digit (``"007"``, ``"02134"``) are kept as strings so that padded
identifiers and zip codes survive.
"""

import math
import re
from typing import Any

_LEADING_ZERO = re.compile(r"0[0-9]")
_INFINITY = re.compile(r"[+-]?Infinity")
_RADIX_INTEGER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class _Undefined:
    """Marker for a value that is present but spelled ``undefined``."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

_LITERALS: dict[str, Any] = {
    "null": None,
    "undefined": UNDEFINED,
    "true": True,
    "false": False,
}


def is_numeric_eligible(value: str) -> bool:
    """Return True if ``value`` may be parsed as a number.

    The empty string is never eligible, and neither is anything that starts
    with a zero followed by another digit once surrounding whitespace is
    removed.
    """
    if value == "":
        return False
    return _LEADING_ZERO.match(value.strip()) is None


def parse_number(value: str) -> int | float | None:
    """Parse a numeric literal, returning None when it is not one.

    Integer literals (decimal, ``0x``, ``0o``, ``0b``) give an ``int``;
    decimals, exponents, ``NaN`` and ``Infinity`` give a ``float``.
    """
    text = value.strip()
    # Unlike JavaScript Number(), blank strings are not read as 0
    if not text:
        return None
    if text == "NaN":
        return math.nan
    if _INFINITY.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    if _RADIX_INTEGER.fullmatch(text):
        return int(text, 0)
    if _DECIMAL_INTEGER.fullmatch(text):
        return int(text)
    if _DECIMAL.fullmatch(text):
        return float(text)
    return None


def coerce_value(raw: str) -> Any:
    """Run ``raw`` through the coercion pipeline."""
    if raw in _LITERALS:
        return _LITERALS[raw]
    if is_numeric_eligible(raw):
        number = parse_number(raw)
        if number is not None:
            return number
    return raw
