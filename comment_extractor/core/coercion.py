"""
Integer coercion for scraped values

Ids and timestamps are signed 64-bit. Only plain ASCII decimal text is
accepted: no digit separators, no surrounding whitespace, no non-ASCII digits.
"""

import re
from typing import Any, Optional

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

INT_PATTERN = re.compile(r'[+-]?[0-9]+')
FLOAT_PATTERN = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def _in_range(number: int) -> Optional[int]:
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def parse_int64(value: Any) -> Optional[int]:
    """Parse decimal integer text, None if absent, malformed or out of range"""
    if not isinstance(value, str) or not INT_PATTERN.fullmatch(value):
        return None
    return _in_range(int(value))


def coerce_int64(value: Any) -> int:
    """
    Coerce a JSON scalar to a 64-bit int

    Integers, floats and numeric text convert (floats truncate). Anything
    else, including out-of-range numbers, gives 0.
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, str):
        number = parse_int64(value)
        if number is not None:
            return number
        if not FLOAT_PATTERN.fullmatch(value):
            return 0
        value = float(value)

    if isinstance(value, float):
        # NaN / Infinity are accepted by the json module
        try:
            value = int(value)
        except (ValueError, OverflowError):
            return 0

    if isinstance(value, int):
        return _in_range(value) or 0
    return 0
