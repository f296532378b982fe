"""
Record Identifier Parsing

Path ids arrive as text and are read the way numeric strings are coerced
on the web: surrounding whitespace is ignored, an empty string is zero,
decimal/exponent notation and 0x/0o/0b prefixes are numbers, and
"Infinity" is a number too. Only ASCII digits count. Anything else is
not a number.

A number is not necessarily a usable id: 1.5, Infinity or 1e30 can never
match an integer primary key, so parse_record_id() returns None for them and
callers answer "not found".

Usage:
======
    from kennel.shared.utils.identifiers import parse_record_id

    parse_record_id("7")      # 7
    parse_record_id(" 7 ")    # 7
    parse_record_id("1.5")    # None
    parse_record_id("abc")    # raises InvalidIdError
"""

import math
import re
from typing import Optional

from kennel.shared.core.exceptions import InvalidIdError


_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY = re.compile(r"[+-]?Infinity")

# Whitespace and line terminators trimmed from numeric text. Narrower than
# str.strip(), which also drops the \x1c-\x1f separators and \x85.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Largest value a signed 64-bit integer column can hold
MAX_RECORD_ID = 2**63 - 1


def parse_number(raw: str) -> float:
    """
    Read text as a number.

    Raises:
        InvalidIdError: If the text is not a number
    """
    text = raw.strip(WHITESPACE)
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _PREFIXED.fullmatch(text):
        return float(int(text, 0))
    if _INFINITY.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    raise InvalidIdError()


def parse_record_id(raw: str) -> Optional[int]:
    """
    Read a path id.

    Returns:
        The integer id, or None when the number can never match a record

    Raises:
        InvalidIdError: If the text is not a number
    """
    value = parse_number(raw)
    if not math.isfinite(value) or not value.is_integer():
        return None
    if abs(value) > MAX_RECORD_ID:
        return None
    return int(value)
