"""Type conversion utilities for safely handling raw form values.

This module is the single source of truth for safe type conversion.
Form fields arrive as strings (or not at all); anything that does not
parse to a finite number becomes the default, so NaN and infinities
never reach the recommendation engine.
"""

import math
from typing import Any


def safe_float(val: Any, default: float = 0.0) -> float:
    """Safely convert a value to a finite float.

    Args:
        val: Value to convert (can be str, int, float, None, etc.)
        default: Value to return if conversion fails

    Returns:
        Converted float or default value

    Examples:
        >>> safe_float("72.5")
        72.5
        >>> safe_float(None)
        0.0
        >>> safe_float("nan", default=-1.0)
        -1.0
    """
    if val is None or val == "":
        return default
    try:
        result = float(val)
    except (ValueError, TypeError):
        return default
    if not math.isfinite(result):
        return default
    return result


def safe_int(val: Any, default: int = 0) -> int:
    """Safely convert a value to int.

    Examples:
        >>> safe_int("7")
        7
        >>> safe_int("6.0")
        6
        >>> safe_int(None)
        0
    """
    result = safe_float(val, default=math.nan)
    if math.isnan(result):
        return default
    return int(result)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value into the closed range [low, high]."""
    return max(low, min(high, value))
