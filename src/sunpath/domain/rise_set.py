# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunrise and sunset.

Starting from the transit, the half-day arc Ht (hour angle at which the
Sun's centre sits at the standard horizon depression) gives the first
estimates J☉ ∓ Ht/360. Each estimate is then refined until the hour angle
matches ∓Ht recomputed at that instant.

Inside the polar circles the half-day arc does not exist on some dates:
the acos argument leaves [-1, 1]. At the transit this is reported as polar
day (the Sun never sets) or polar night (the Sun never rises). Close to
those dates the arc exists at the transit but may vanish while one side is
refined; that side alone is reported missing (NO_RISE / NO_SET). Never NaN.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import numpy as np

from sunpath.domain.angles import to_degrees, to_radians, wrap_signed_degrees
from sunpath.domain.ecliptic import ecliptic_longitude_of_sun
from sunpath.domain.equatorial import declination
from sunpath.domain.observer import hour_angle
from sunpath.domain.orbital_elements import SOLAR_CONSTANTS, SolarConstants
from sunpath.domain.refinement import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE_DAYS,
    refine_fixed_point,
)
from sunpath.domain.transit import solar_transit

logger = logging.getLogger(__name__)


class DaylightCondition(Enum):
    """Whether the Sun crosses the horizon on a given day."""
    NORMAL = "normal"
    POLAR_DAY = "polar_day"  # never sets
    POLAR_NIGHT = "polar_night"  # never rises
    NO_RISE = "no_rise"  # sets, but no rise found before the transit
    NO_SET = "no_set"  # rises, but no set found after the transit


class PolarConditionError(ValueError):
    """The half-day arc is undefined: the Sun does not cross the horizon."""

    def __init__(self, condition: DaylightCondition, argument: float) -> None:
        self.condition = condition
        self.argument = argument
        super().__init__(
            f"{condition.value}: half-day arc acos argument {argument:.6f} "
            "outside [-1, 1]"
        )


@dataclass(frozen=True)
class RiseSet:
    """Transit, sunrise and sunset as Julian day counts.

    NORMAL has both events; NO_RISE keeps the sunset, NO_SET keeps the
    sunrise; POLAR_DAY and POLAR_NIGHT have neither.
    """
    condition: DaylightCondition
    transit: float
    sunrise: Optional[float] = None
    sunset: Optional[float] = None


def half_day_arc(
    lat_deg: float,
    declination_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """
    Hour angle of sunset (= −hour angle of sunrise).

    Ht = acos((h0 − sin φ sin δ) / (cos φ cos δ))

    Args:
        lat_deg: Observer latitude φ (degrees).
        declination_deg: Solar declination δ (degrees).
        constants: Supplies the horizon depression h0.

    Returns:
        Half-day arc in degrees, [0, 180].

    Raises:
        PolarConditionError: If the acos argument is below -1 (polar day)
            or above 1 (polar night).
    """
    phi_rad = to_radians(lat_deg)
    dec_rad = to_radians(declination_deg)
    cos_ht = float(
        (constants.horizon_depression - np.sin(phi_rad) * np.sin(dec_rad))
        / (np.cos(phi_rad) * np.cos(dec_rad))
    )
    if cos_ht < -1.0:
        raise PolarConditionError(DaylightCondition.POLAR_DAY, cos_ht)
    if cos_ht > 1.0:
        raise PolarConditionError(DaylightCondition.POLAR_NIGHT, cos_ht)
    return to_degrees(np.arccos(cos_ht))


def _half_day_arc_at(jd: float, lat_deg: float, constants: SolarConstants) -> float:
    dec_deg = declination(ecliptic_longitude_of_sun(jd, constants), constants)
    return half_day_arc(lat_deg, dec_deg, constants)


def _refine_event(
    initial: float,
    correction: Callable[[float], float],
    event: str,
    lat_deg: float,
    tolerance_days: float,
    max_iterations: int,
) -> Optional[float]:
    """Refine one horizon crossing; None when the arc vanishes on the way."""
    try:
        return refine_fixed_point(initial, correction, tolerance_days, max_iterations).value
    except PolarConditionError as exc:
        logger.debug("No %s at lat=%.4f near JD %.5f: %s", event, lat_deg, initial, exc)
        return None


def _condition_at(jd: float, lat_deg: float, constants: SolarConstants) -> DaylightCondition:
    """POLAR_DAY if the half-day arc at jd would exceed 90°, else POLAR_NIGHT."""
    dec_rad = to_radians(declination(ecliptic_longitude_of_sun(jd, constants), constants))
    phi_rad = to_radians(lat_deg)
    if float(np.sin(phi_rad) * np.sin(dec_rad)) > constants.horizon_depression:
        return DaylightCondition.POLAR_DAY
    return DaylightCondition.POLAR_NIGHT


def sunrise_sunset(
    jd: float,
    lat_deg: float,
    lon_deg: float,
    constants: SolarConstants = SOLAR_CONSTANTS,
    tolerance_days: float = DEFAULT_TOLERANCE_DAYS,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RiseSet:
    """
    Sunrise and sunset around the transit nearest to a reference instant.

    Args:
        jd: Reference Julian day count.
        lat_deg: Observer latitude, [-90, 90].
        lon_deg: Observer longitude (sidereal-time sign convention).
        constants: Formula coefficients.
        tolerance_days: Convergence tolerance on the per-iteration step.
        max_iterations: Iteration cap for each of the two refinements.

    Returns:
        RiseSet. POLAR_DAY/POLAR_NIGHT when the half-day arc is undefined at
        the transit; NO_RISE/NO_SET when only one side leaves the acos
        domain during refinement, with the other event kept. If both sides
        leave it, POLAR_DAY or POLAR_NIGHT by the side of the equinox the
        transit declination lies on for this hemisphere.

    Raises:
        ValueError: If the latitude lies outside [-90, 90].
    """
    if not -90.0 <= lat_deg <= 90.0:
        raise ValueError(f"latitude must be within [-90, 90], got {lat_deg}")

    transit = solar_transit(jd, lon_deg, constants, tolerance_days, max_iterations)

    try:
        ht_deg = _half_day_arc_at(transit, lat_deg, constants)
    except PolarConditionError as exc:
        logger.debug(
            "No sunrise/sunset at lat=%.4f lon=%.4f near JD %.5f: %s",
            lat_deg, lon_deg, transit, exc,
        )
        return RiseSet(condition=exc.condition, transit=transit)

    def rise_correction(estimate: float) -> float:
        h_deg = wrap_signed_degrees(hour_angle(estimate, lon_deg, constants))
        return -(h_deg + _half_day_arc_at(estimate, lat_deg, constants)) / 360.0

    def set_correction(estimate: float) -> float:
        h_deg = wrap_signed_degrees(hour_angle(estimate, lon_deg, constants))
        return -(h_deg - _half_day_arc_at(estimate, lat_deg, constants)) / 360.0

    sunrise = _refine_event(
        transit - ht_deg / 360.0, rise_correction, "sunrise",
        lat_deg, tolerance_days, max_iterations,
    )
    sunset = _refine_event(
        transit + ht_deg / 360.0, set_correction, "sunset",
        lat_deg, tolerance_days, max_iterations,
    )

    if sunrise is not None and sunset is not None:
        condition = DaylightCondition.NORMAL
    elif sunrise is not None:
        condition = DaylightCondition.NO_SET
    elif sunset is not None:
        condition = DaylightCondition.NO_RISE
    else:
        # Neither side crosses: the day behaves as polar around the transit.
        condition = _condition_at(transit, lat_deg, constants)

    return RiseSet(condition=condition, transit=transit, sunrise=sunrise, sunset=sunset)

