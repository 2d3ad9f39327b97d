# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Ecliptic coordinates of the Sun as seen from the Earth.

The Sun's ecliptic latitude is taken as zero, so the position is the
longitude alone.
"""
from dataclasses import dataclass

from sunpath.domain.angles import normalize_degrees
from sunpath.domain.orbital_elements import (
    SOLAR_CONSTANTS,
    SolarConstants,
    equation_of_center,
    mean_anomaly,
)


@dataclass(frozen=True)
class EclipticPosition:
    """Geocentric ecliptic longitude of the Sun."""
    longitude_deg: float


def mean_longitude(
    mean_anomaly_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """Mean longitude of the Earth: M + Π (degrees, not reduced)."""
    return mean_anomaly_deg + constants.perihelion_longitude_deg


def mean_longitude_of_sun(jd: float, constants: SolarConstants = SOLAR_CONSTANTS) -> float:
    """Mean longitude of the Sun: the Earth's mean longitude plus 180° (not reduced)."""
    return mean_longitude(mean_anomaly(jd, constants), constants) + 180.0


def ecliptic_longitude_of_sun(jd: float, constants: SolarConstants = SOLAR_CONSTANTS) -> float:
    """
    True ecliptic longitude of the Sun.

    λ = (M + Π + C + 180) mod 360

    Args:
        jd: Julian day count.
        constants: Formula coefficients.

    Returns:
        Ecliptic longitude in degrees, [0, 360).
    """
    m_deg = mean_anomaly(jd, constants)
    return normalize_degrees(
        m_deg
        + constants.perihelion_longitude_deg
        + equation_of_center(m_deg, constants)
        + 180.0
    )


def ecliptic_position(jd: float, constants: SolarConstants = SOLAR_CONSTANTS) -> EclipticPosition:
    return EclipticPosition(longitude_deg=ecliptic_longitude_of_sun(jd, constants))
