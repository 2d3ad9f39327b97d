# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar transit: the instant the Sun crosses the observer's meridian.

A closed-form estimate (nearest cycle plus an equation-of-time
approximation) is refined by driving the hour angle to zero.
"""
import numpy as np

from sunpath.domain.angles import to_radians, wrap_signed_degrees
from sunpath.domain.ecliptic import mean_longitude_of_sun
from sunpath.domain.observer import hour_angle
from sunpath.domain.orbital_elements import SOLAR_CONSTANTS, SolarConstants, mean_anomaly
from sunpath.domain.time_scale import days_since_j2000
from sunpath.domain.refinement import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE_DAYS,
    Refinement,
    refine_fixed_point,
)


def transit_estimate(
    jd: float,
    lon_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """
    First-order transit estimate nearest to a reference instant.

    n  = round((J − J2000 − J0) − lon/360)
    J* = J + (n − n*)
    J☉ = J* + J1 sin M + J2 sin 2L☉     (M, L☉ evaluated at J*)

    Args:
        jd: Reference Julian day count.
        lon_deg: Observer longitude (sidereal-time sign convention).
        constants: Formula coefficients.

    Returns:
        Estimated transit Julian day count.
    """
    c = constants
    cycles = (days_since_j2000(jd, c.j2000_jd) - c.transit_j0_days) - lon_deg / 360.0
    jd_star = jd + (round(cycles) - cycles)

    m_rad = to_radians(mean_anomaly(jd_star, c))
    l_sun_rad = to_radians(mean_longitude_of_sun(jd_star, c))
    return float(
        jd_star
        + c.transit_j1_days * np.sin(m_rad)
        + c.transit_j2_days * np.sin(2.0 * l_sun_rad)
    )


def solar_transit_refinement(
    jd: float,
    lon_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
    tolerance_days: float = DEFAULT_TOLERANCE_DAYS,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Refinement:
    """Transit refinement with its iteration count and convergence flag."""
    def correction(estimate: float) -> float:
        # At transit H ≡ 0 (mod 360); a raw 360 must not move the estimate a day.
        return -wrap_signed_degrees(hour_angle(estimate, lon_deg, constants)) / 360.0

    return refine_fixed_point(
        transit_estimate(jd, lon_deg, constants),
        correction,
        tolerance=tolerance_days,
        max_iterations=max_iterations,
    )


def solar_transit(
    jd: float,
    lon_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
    tolerance_days: float = DEFAULT_TOLERANCE_DAYS,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> float:
    """
    Instant of solar transit nearest to a reference instant.

    Args:
        jd: Reference Julian day count.
        lon_deg: Observer longitude (sidereal-time sign convention).
        constants: Formula coefficients.
        tolerance_days: Convergence tolerance on the per-iteration step.
        max_iterations: Iteration cap; the last estimate is returned if hit.

    Returns:
        Transit Julian day count.
    """
    return solar_transit_refinement(
        jd, lon_deg, constants, tolerance_days, max_iterations,
    ).value
