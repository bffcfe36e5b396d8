"""
Utility Functions for the Reactor Simulator

This module provides small helpers for range limiting and
percent/fraction conversions shared by the physics, safety and
presentation layers.
"""

from typing import Union

Number = Union[int, float]


def clamp(value: Number, lower: Number, upper: Number) -> float:
    """
    Constrain a value to the closed interval [lower, upper].

    Args:
        value: Value to constrain
        lower: Lower bound
        upper: Upper bound

    Returns:
        The value, saturated at the nearer bound when outside the interval
    """
    if lower > upper:
        raise ValueError(f"Empty interval [{lower}, {upper}]")
    return float(max(lower, min(upper, value)))


def clamp_non_negative(value: Number) -> float:
    """Constrain a value to be at least zero."""
    return float(max(0.0, value))


def percent_to_fraction(percent: Number) -> float:
    """Convert a percentage (0-100) to a fraction (0-1)."""
    return percent / 100.0


def fraction_to_percent(fraction: Number) -> int:
    """
    Convert a fraction to a whole percentage, truncating toward zero.

    Args:
        fraction: Fraction, typically in [0, 1]

    Returns:
        Integer percentage
    """
    return int(fraction * 100)
