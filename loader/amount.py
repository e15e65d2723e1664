from __future__ import annotations
import re

# Longest leading decimal number, the way C's atof reads it.
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

def str_to_double(text: str, ch: str = "$") -> float:
    """Strip every ``ch`` from ``text`` and parse the leading number.

    Empty or non-numeric text yields 0.0. Parsing stops at the first
    character that cannot continue a number, so "1,234.50" reads as 1.0.
    """
    if text is None:
        return 0.0
    cleaned = str(text).replace(ch, "") if ch else str(text)
    m = _LEADING_NUMBER.match(cleaned)
    if not m:
        return 0.0
    return float(m.group(1))
