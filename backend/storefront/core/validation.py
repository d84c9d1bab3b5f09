"""
Conversion of untyped request input into typed values.

All helpers return None for rejected input instead of raising, so callers decide
which error message to report. None of them touch storage.

- parse_id(value)    -> positive int identifier or None
- parse_price(value) -> finite float or None
- clean_text(value)  -> trimmed non-empty str or None
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

__all__ = ["parse_id", "parse_price", "clean_text"]

# Decimal numeric literal: optional sign, digits with optional fraction, optional exponent
_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


def _to_number(value: Any) -> Optional[float]:
    # bool is an int subclass; true/false are never numbers here
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return float(value)
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_RE.match(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def parse_id(value: Any) -> Optional[int]:
    """
    Return value as a positive integer identifier, or None.

    Accepts ints, integral floats and decimal strings ("7", " 7 ", "7.0", "7e0").
    Rejects missing values, booleans, non-numeric text, nan/inf, fractions and values <= 0.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value if value > 0 else None
    number = _to_number(value)
    if number is None or not number.is_integer() or number <= 0:
        return None
    return int(number)


def parse_price(value: Any) -> Optional[float]:
    """Return value as a finite float (numbers or numeric strings), or None."""
    return _to_number(value)


def clean_text(value: Any) -> Optional[str]:
    """Return the trimmed string if it is non-empty, else None."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None
