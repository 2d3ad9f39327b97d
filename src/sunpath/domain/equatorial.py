# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Ecliptic → equatorial rotation about the obliquity of the ecliptic.

With zero ecliptic latitude the rotation reduces to:
    α = atan2(sin λ cos ε, cos λ)
    δ = asin(sin λ sin ε)
"""
from dataclasses import dataclass

import numpy as np

from sunpath.domain.angles import to_degrees, to_radians
from sunpath.domain.orbital_elements import SOLAR_CONSTANTS, SolarConstants


@dataclass(frozen=True)
class EquatorialPosition:
    """Right ascension (-180, 180] and declination (within ±ε), degrees."""
    right_ascension_deg: float
    declination_deg: float


def right_ascension(
    ecliptic_longitude_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """Right ascension of the Sun in degrees, (-180, 180]."""
    lam_rad = to_radians(ecliptic_longitude_deg)
    eps_rad = to_radians(constants.obliquity_deg)
    return to_degrees(np.arctan2(np.sin(lam_rad) * np.cos(eps_rad), np.cos(lam_rad)))


def declination(
    ecliptic_longitude_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """Declination of the Sun in degrees; |δ| never exceeds the obliquity."""
    lam_rad = to_radians(ecliptic_longitude_deg)
    eps_rad = to_radians(constants.obliquity_deg)
    return to_degrees(np.arcsin(np.sin(lam_rad) * np.sin(eps_rad)))


def equatorial_position(
    ecliptic_longitude_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> EquatorialPosition:
    return EquatorialPosition(
        right_ascension_deg=right_ascension(ecliptic_longitude_deg, constants),
        declination_deg=declination(ecliptic_longitude_deg, constants),
    )
