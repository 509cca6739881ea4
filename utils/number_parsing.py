from __future__ import annotations

import re
from typing import Optional


_SHORTHAND = re.compile(r"^(-?[0-9]+(?:\.[0-9]+)?)([KMB]?)$")
_FACTORS = {"": 1, "K": 1000, "M": 1000000, "B": 1000000000}


def parse_number(value) -> Optional[float]:
    """Parse CSV cells like '394328000000', '1,200', '2.5K', '3M' into a float.

    Returns None for blank cells. Raises ValueError for anything else that
    does not look like a number.
    """
    if value is None:
        return None
    s = str(value).strip().upper().replace(",", "")
    if not s:
        return None
    m = _SHORTHAND.match(s)
    if not m:
        raise ValueError(f"not a number: {value!r}")
    return float(m.group(1)) * _FACTORS[m.group(2)]


def parse_int(value) -> Optional[int]:
    parsed = parse_number(value)
    if parsed is None:
        return None
    if not parsed.is_integer():
        raise ValueError(f"not an integer: {value!r}")
    return int(parsed)
