# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Observer geometry: sidereal time, hour angle, azimuth and altitude.

Longitude enters the sidereal-time formula subtracted from the Greenwich
angle, θ = θ0 + θ1·(J − J2000) − lon. A location east of Greenwich is
therefore passed as a negative value (52°N 5°E is lat=52, lon=-5).

Azimuth is measured from the south, positive towards the west.
"""
from dataclasses import dataclass

import numpy as np

from sunpath.domain.angles import clamp_unit, normalize_degrees, to_degrees, to_radians
from sunpath.domain.ecliptic import ecliptic_longitude_of_sun
from sunpath.domain.equatorial import declination, right_ascension
from sunpath.domain.orbital_elements import SOLAR_CONSTANTS, SolarConstants
from sunpath.domain.time_scale import days_since_j2000


@dataclass(frozen=True)
class GeodeticLocation:
    """Observer location. Longitude in the sidereal-time sign convention above."""
    lat_deg: float
    lon_deg: float


@dataclass(frozen=True)
class HorizontalPosition:
    """Azimuth (from south, westward) and altitude [-90, 90], degrees."""
    azimuth_deg: float
    altitude_deg: float


def sidereal_time(
    jd: float,
    lon_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """Local sidereal time in degrees, [0, 360)."""
    c = constants
    return normalize_degrees(
        c.sidereal_at_epoch_deg + c.sidereal_rate_deg * days_since_j2000(jd, c.j2000_jd) - lon_deg
    )


def hour_angle(
    jd: float,
    lon_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """
    Hour angle of the Sun: local sidereal time minus right ascension.

    Not reduced to a fixed range; the result lies in [-180, 540). Callers
    that need the branch around the meridian wrap it themselves.
    """
    lam_deg = ecliptic_longitude_of_sun(jd, constants)
    return sidereal_time(jd, lon_deg, constants) - right_ascension(lam_deg, constants)


def azimuth(hour_angle_deg: float, lat_deg: float, declination_deg: float) -> float:
    """
    Azimuth of the Sun.

    A = atan2(sin H, cos H sin φ − tan δ cos φ)

    Args:
        hour_angle_deg: Hour angle H (degrees).
        lat_deg: Observer latitude φ (degrees).
        declination_deg: Declination δ (degrees).

    Returns:
        Azimuth in degrees from the south, positive westward, (-180, 180].
    """
    h_rad = to_radians(hour_angle_deg)
    phi_rad = to_radians(lat_deg)
    dec_rad = to_radians(declination_deg)
    return to_degrees(np.arctan2(
        np.sin(h_rad),
        np.cos(h_rad) * np.sin(phi_rad) - np.tan(dec_rad) * np.cos(phi_rad),
    ))


def altitude(hour_angle_deg: float, lat_deg: float, declination_deg: float) -> float:
    """
    Altitude of the Sun above the geometric horizon.

    h = asin(sin φ sin δ + cos φ cos δ cos H)

    The asin argument is clamped to [-1, 1]; a clamped argument gives
    exactly ±90.

    Returns:
        Altitude in degrees, [-90, 90].
    """
    h_rad = to_radians(hour_angle_deg)
    phi_rad = to_radians(lat_deg)
    dec_rad = to_radians(declination_deg)
    sin_alt = clamp_unit(
        np.sin(phi_rad) * np.sin(dec_rad)
        + np.cos(phi_rad) * np.cos(dec_rad) * np.cos(h_rad)
    )
    if sin_alt == 1.0:
        return 90.0
    if sin_alt == -1.0:
        return -90.0
    return to_degrees(np.arcsin(sin_alt))


def horizontal_position(
    jd: float,
    location: GeodeticLocation,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> HorizontalPosition:
    """Azimuth and altitude of the Sun for an observer at one instant."""
    h_deg = hour_angle(jd, location.lon_deg, constants)
    dec_deg = declination(ecliptic_longitude_of_sun(jd, constants), constants)
    return HorizontalPosition(
        azimuth_deg=azimuth(h_deg, location.lat_deg, dec_deg),
        altitude_deg=altitude(h_deg, location.lat_deg, dec_deg),
    )
