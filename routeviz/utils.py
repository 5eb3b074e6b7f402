"""
Utility Functions for Route Visualization

This module provides helper functions for numeric parsing and rounding used
throughout the route pipeline.
"""

import numpy as np
from typing import Optional


def safe_float(value) -> float:
    """
    Safely convert a value to float, returning NaN on failure.

    Strings are stripped before conversion; empty strings yield NaN.

    Args:
        value: Value to convert (string, number, etc.).

    Returns:
        Float value, or np.nan if conversion fails.
    """
    if isinstance(value, str):
        value = value.strip()
    try:
        return float(value)
    except (TypeError, ValueError):
        return np.nan


def finite_or_none(value) -> Optional[float]:
    """
    Parse a value as a finite float.

    Args:
        value: Value to convert.

    Returns:
        The float, or None if it does not parse or is NaN/Inf.
    """
    number = safe_float(value)
    if not np.isfinite(number):
        return None
    return number


def round_float(value, digits: int = 3) -> Optional[float]:
    """
    Round a float value, handling None, NaN, and Inf.

    Args:
        value: Value to round.
        digits: Number of decimal places. Default 3.

    Returns:
        Rounded float, or None if value is None, NaN, or Inf.
    """
    if value is None or (isinstance(value, float) and (np.isnan(value) or np.isinf(value))):
        return None
    return round(float(value), digits)
