# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
sunpath

Apparent position of the Sun (ecliptic, equatorial and horizontal
coordinates) and the instants of solar transit, sunrise and sunset for a
location. Low-precision analytical formulas, arcminute range; no I/O.
"""

from sunpath.domain.angles import (
    clamp_unit,
    normalize_degrees,
    to_degrees,
    to_radians,
    wrap_signed_degrees,
)
from sunpath.domain.time_scale import (
    J2000_JD,
    UNIX_EPOCH_JD,
    datetime_to_julian,
    days_since_j2000,
    julian_to_datetime,
)
from sunpath.domain.orbital_elements import (
    SOLAR_CONSTANTS,
    OrbitalState,
    SolarConstants,
    equation_of_center,
    mean_anomaly,
    orbital_state,
)
from sunpath.domain.ecliptic import (
    EclipticPosition,
    ecliptic_longitude_of_sun,
    ecliptic_position,
    mean_longitude,
    mean_longitude_of_sun,
)
from sunpath.domain.equatorial import (
    EquatorialPosition,
    declination,
    equatorial_position,
    right_ascension,
)
from sunpath.domain.observer import (
    GeodeticLocation,
    HorizontalPosition,
    altitude,
    azimuth,
    horizontal_position,
    hour_angle,
    sidereal_time,
)
from sunpath.domain.refinement import (
    Refinement,
    refine_fixed_point,
)
from sunpath.domain.transit import (
    solar_transit,
    solar_transit_refinement,
    transit_estimate,
)
from sunpath.domain.rise_set import (
    DaylightCondition,
    PolarConditionError,
    RiseSet,
    half_day_arc,
    sunrise_sunset,
)
from sunpath.domain.almanac import (
    SolarPosition,
    SunEvents,
    day_length_hours,
    solar_position,
    sun_events,
)

__all__ = [
    "clamp_unit",
    "normalize_degrees",
    "to_degrees",
    "to_radians",
    "wrap_signed_degrees",
    "J2000_JD",
    "UNIX_EPOCH_JD",
    "datetime_to_julian",
    "days_since_j2000",
    "julian_to_datetime",
    "SOLAR_CONSTANTS",
    "OrbitalState",
    "SolarConstants",
    "equation_of_center",
    "mean_anomaly",
    "orbital_state",
    "EclipticPosition",
    "ecliptic_longitude_of_sun",
    "ecliptic_position",
    "mean_longitude",
    "mean_longitude_of_sun",
    "EquatorialPosition",
    "declination",
    "equatorial_position",
    "right_ascension",
    "GeodeticLocation",
    "HorizontalPosition",
    "altitude",
    "azimuth",
    "horizontal_position",
    "hour_angle",
    "sidereal_time",
    "Refinement",
    "refine_fixed_point",
    "solar_transit",
    "solar_transit_refinement",
    "transit_estimate",
    "DaylightCondition",
    "PolarConditionError",
    "RiseSet",
    "half_day_arc",
    "sunrise_sunset",
    "SolarPosition",
    "SunEvents",
    "day_length_hours",
    "solar_position",
    "sun_events",
]
