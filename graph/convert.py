"""
convert.py — Strict Scalar Parsing
==================================
Untrusted JSON (from_dict, API fields) goes through these before it
reaches the model.  Anything that cannot be read exactly raises
ValueError; nothing is truncated or guessed.
"""

import math


def as_int(value, name: str = "value") -> int:
    """int, integral float (2.0) or numeric string.  Rejects bools and 1.7."""
    if isinstance(value, bool):
        raise ValueError(f"'{name}' must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"'{name}' must be an integer, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{name}' must be an integer, got {value!r}") from None


def as_float(value, name: str = "value") -> float:
    if isinstance(value, bool):
        raise ValueError(f"'{name}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{name}' must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"'{name}' must be finite, got {value!r}")
    return number
