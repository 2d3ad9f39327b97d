# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle utilities.

Degree/radian conversion and range normalization shared by every stage of
the solar pipeline. All functions are total over finite reals.
"""
import numpy as np

DEGREES_PER_CIRCLE: float = 360.0


def to_radians(degrees: float) -> float:
    """Degrees → radians."""
    return float(np.radians(degrees))


def to_degrees(radians: float) -> float:
    """Radians → degrees."""
    return float(np.degrees(radians))


def normalize_degrees(angle_deg: float) -> float:
    """
    Reduce an angle into [0, 360).

    Python's % already returns a non-negative result for a positive modulus,
    but a tiny negative input rounds to 360.0, which is folded back to 0.0.
    """
    angle_deg = angle_deg % DEGREES_PER_CIRCLE
    if angle_deg >= DEGREES_PER_CIRCLE:
        angle_deg -= DEGREES_PER_CIRCLE
    return angle_deg


def wrap_signed_degrees(angle_deg: float) -> float:
    """Reduce an angle into [-180, 180)."""
    return normalize_degrees(angle_deg + 180.0) - 180.0


def clamp_unit(value: float) -> float:
    """Clamp into [-1, 1] so asin/acos never see floating-point overshoot."""
    return float(np.clip(value, -1.0, 1.0))
