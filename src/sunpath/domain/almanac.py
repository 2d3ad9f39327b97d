# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Composite solar almanac entries.

Bundles the pipeline stages for one instant, and converts the rise/set
solution to calendar datetimes for callers that work in wall-clock time.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sunpath.domain.ecliptic import EclipticPosition, ecliptic_position
from sunpath.domain.equatorial import EquatorialPosition, equatorial_position
from sunpath.domain.observer import (
    GeodeticLocation,
    HorizontalPosition,
    altitude,
    azimuth,
    hour_angle,
)
from sunpath.domain.orbital_elements import (
    SOLAR_CONSTANTS,
    OrbitalState,
    SolarConstants,
    orbital_state,
)
from sunpath.domain.rise_set import DaylightCondition, RiseSet, sunrise_sunset
from sunpath.domain.time_scale import datetime_to_julian, julian_to_datetime


@dataclass(frozen=True)
class SolarPosition:
    """Every coordinate frame of the Sun for one instant and observer."""
    jd: float
    orbital: OrbitalState
    ecliptic: EclipticPosition
    equatorial: EquatorialPosition
    hour_angle_deg: float
    horizontal: HorizontalPosition


@dataclass(frozen=True)
class SunEvents:
    """Transit, sunrise and sunset as aware datetimes in the caller's zone."""
    condition: DaylightCondition
    transit: datetime
    sunrise: Optional[datetime]
    sunset: Optional[datetime]


def solar_position(
    jd: float,
    location: GeodeticLocation,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> SolarPosition:
    """
    Run the full position pipeline for one instant.

    Args:
        jd: Julian day count.
        location: Observer location.
        constants: Formula coefficients.

    Returns:
        SolarPosition with the orbital state and ecliptic, equatorial and
        horizontal coordinates.
    """
    ecl = ecliptic_position(jd, constants)
    eq = equatorial_position(ecl.longitude_deg, constants)
    h_deg = hour_angle(jd, location.lon_deg, constants)
    return SolarPosition(
        jd=jd,
        orbital=orbital_state(jd, constants),
        ecliptic=ecl,
        equatorial=eq,
        hour_angle_deg=h_deg,
        horizontal=HorizontalPosition(
            azimuth_deg=azimuth(h_deg, location.lat_deg, eq.declination_deg),
            altitude_deg=altitude(h_deg, location.lat_deg, eq.declination_deg),
        ),
    )


def sun_events(
    moment: datetime,
    location: GeodeticLocation,
    tz_offset_minutes: float = 0.0,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> SunEvents:
    """
    Transit, sunrise and sunset around a calendar instant.

    Args:
        moment: Reference instant; naive values are read at
            UTC + tz_offset_minutes.
        location: Observer location.
        tz_offset_minutes: Zone of the inputs and outputs, minutes east of UTC.
        constants: Formula coefficients.

    Returns:
        SunEvents with aware datetimes in UTC + tz_offset_minutes; sunrise and
        sunset are None for polar day/night.
    """
    jd = datetime_to_julian(moment, tz_offset_minutes)
    result = sunrise_sunset(jd, location.lat_deg, location.lon_deg, constants)

    def _to_datetime(event_jd: Optional[float]) -> Optional[datetime]:
        if event_jd is None:
            return None
        return julian_to_datetime(event_jd, tz_offset_minutes)

    return SunEvents(
        condition=result.condition,
        transit=julian_to_datetime(result.transit, tz_offset_minutes),
        sunrise=_to_datetime(result.sunrise),
        sunset=_to_datetime(result.sunset),
    )


def day_length_hours(
    jd: float,
    location: GeodeticLocation,
    constants: SolarConstants = SOLAR_CONSTANTS,
) -> float:
    """
    Hours between sunrise and sunset; 24 for polar day, 0 for polar night.

    With only one event found, the day is taken as symmetric about the
    transit: twice the distance from the transit to the known event.
    """
    result: RiseSet = sunrise_sunset(jd, location.lat_deg, location.lon_deg, constants)
    if result.condition is DaylightCondition.POLAR_DAY:
        return 24.0
    if result.condition is DaylightCondition.POLAR_NIGHT:
        return 0.0
    if result.condition is DaylightCondition.NO_RISE:
        return 2.0 * (result.sunset - result.transit) * 24.0
    if result.condition is DaylightCondition.NO_SET:
        return 2.0 * (result.transit - result.sunrise) * 24.0
    return (result.sunset - result.sunrise) * 24.0
