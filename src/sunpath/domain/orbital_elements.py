# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar orbital elements.

Mean anomaly and equation of center of the Earth's orbit, from the
low-precision series in "Astronomy Answers: Position of the Sun"
(aa.quae.nl). Accuracy is in the arcminute range, enough for everyday
rise/set computation.
"""
from dataclasses import dataclass

import numpy as np

from sunpath.domain.angles import normalize_degrees, to_radians
from sunpath.domain.time_scale import J2000_JD, days_since_j2000


@dataclass(frozen=True)
class SolarConstants:
    """Fixed coefficients of the solar position and rise/set formulas (degrees, days)."""
    j2000_jd: float = J2000_JD
    # Mean anomaly M = M0 + M1 * (J - J2000)
    mean_anomaly_at_epoch_deg: float = 357.5291
    mean_anomaly_rate_deg: float = 0.98560028
    # Equation of center C = C1 sin M + C2 sin 2M + C3 sin 3M
    center_c1_deg: float = 1.9148
    center_c2_deg: float = 0.0200
    center_c3_deg: float = 0.0003
    perihelion_longitude_deg: float = 102.9373  # Π
    obliquity_deg: float = 23.4393  # ε
    # Sidereal time θ = θ0 + θ1 * (J - J2000) - lon
    sidereal_at_epoch_deg: float = 280.1470
    sidereal_rate_deg: float = 360.9856235
    # Transit J = J* + J1 sin M + J2 sin 2L
    transit_j0_days: float = 0.0009
    transit_j1_days: float = 0.0053
    transit_j2_days: float = -0.0068
    # sin(h0): solar radius plus standard refraction at the horizon
    horizon_depression: float = -0.0146


SOLAR_CONSTANTS: SolarConstants = SolarConstants()


@dataclass(frozen=True)
class OrbitalState:
    """Mean anomaly and equation-of-center correction at one instant."""
    mean_anomaly_deg: float
    equation_of_center_deg: float


def mean_anomaly(jd: float, constants: SolarConstants = SOLAR_CONSTANTS) -> float:
    """
    Mean anomaly of the Earth/Sun at a Julian day count.

    M = 357.5291 + 0.98560028 · (J − 2451545), reduced to [0, 360).

    Args:
        jd: Julian day count.
        constants: Formula coefficients.

    Returns:
        Mean anomaly in degrees, [0, 360).
    """
    c = constants
    return normalize_degrees(
        c.mean_anomaly_at_epoch_deg + c.mean_anomaly_rate_deg * days_since_j2000(jd, c.j2000_jd)
    )


def equation_of_center(
    mean_anomaly_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """
    Equation of center: true anomaly minus mean anomaly.

    C = 1.9148 sin M + 0.0200 sin 2M + 0.0003 sin 3M

    Args:
        mean_anomaly_deg: Mean anomaly (degrees).
        constants: Formula coefficients.

    Returns:
        Correction in degrees, magnitude below 2°.
    """
    c = constants
    m_rad = to_radians(mean_anomaly_deg)
    return float(
        c.center_c1_deg * np.sin(m_rad)
        + c.center_c2_deg * np.sin(2.0 * m_rad)
        + c.center_c3_deg * np.sin(3.0 * m_rad)
    )


def orbital_state(jd: float, constants: SolarConstants = SOLAR_CONSTANTS) -> OrbitalState:
    """Mean anomaly and equation of center bundled for one instant."""
    m_deg = mean_anomaly(jd, constants)
    return OrbitalState(
        mean_anomaly_deg=m_deg,
        equation_of_center_deg=equation_of_center(m_deg, constants),
    )
