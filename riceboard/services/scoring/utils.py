# riceboard/services/scoring/utils.py

from __future__ import annotations

import math
from typing import Optional, Tuple


def safe_div(numerator: Optional[float], denominator: Optional[float]) -> Tuple[Optional[float], Optional[str]]:
    """Safely divide two optional floats.

    Returns (result, warning). A missing operand, a non-positive denominator or
    a non-finite quotient yields result=None with a warning; never raises.
    """
    if denominator is None or denominator <= 0:
        return None, "Denominator missing or non-positive; score undefined."
    if numerator is None:
        return None, "Numerator missing; score undefined."
    try:
        result = numerator / denominator
    except OverflowError:
        return None, "Division overflowed; score undefined."
    if not is_finite(result):
        return None, "Result is not finite; score undefined."
    return result, None


def is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def round_score(value: Optional[float], decimals: int = 2) -> Optional[float]:
    """Presentation rounding; scores are stored and compared at full precision."""
    if value is None:
        return None
    return round(value, decimals)


def format_score(value: Optional[float], decimals: int = 2) -> str:
    """Render a score for display; undefined scores render as an empty string."""
    if value is None:
        return ""
    return f"{value:.{decimals}f}"


__all__ = ["safe_div", "is_finite", "round_score", "format_score"]
