# =============================================================================
# record_primitives/strings.py - String Formatting
# =============================================================================

from __future__ import annotations

import re
from typing import Any

from record_primitives.combinators import to_string
from record_primitives.predicates import type_is

# Position inside a digit run followed by a multiple of three digits
_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")
# Integer digit run: not part of a longer run, not a fractional part
_INTEGER_DIGIT_RUN = re.compile(r"(?<![\d.])\d+")

_is_string = type_is("String")


def _convert_to_string(value: Any) -> str:
    return value if _is_string(value) else to_string(value)


def insert_commas_in_number(value: Any) -> str:
    """
    Format a number (or numeric string) with thousands separators.

    Only the first integer run of digits is grouped; a sign, a fractional
    part (including one with no leading zero, like ".12345") or an exponent
    is left untouched.

    Examples:
        insert_commas_in_number(1234567)     # "1,234,567"
        insert_commas_in_number(-1234)       # "-1,234"
        insert_commas_in_number(1234.56789)  # "1,234.56789"
        insert_commas_in_number("42")        # "42"
    """
    text = _convert_to_string(value)
    return _INTEGER_DIGIT_RUN.sub(
        lambda match: _THOUSANDS.sub(",", match.group()), text, count=1
    )
