# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for observer geometry: sidereal time, hour angle, azimuth, altitude."""
import math

import numpy as np
import pytest

from sunpath.domain.ecliptic import ecliptic_longitude_of_sun
from sunpath.domain.equatorial import declination, right_ascension
from sunpath.domain.observer import (
    GeodeticLocation,
    HorizontalPosition,
    altitude,
    azimuth,
    horizontal_position,
    hour_angle,
    sidereal_time,
)


# Reference observer: 52°N 5°E, written lon=-5 in the sidereal-time convention.
_LAT = 52.0
_LON = -5.0
_JD = 2453097.0


# ── Dataclasses ───────────────────────────────────────────────────

class TestDataclasses:

    def test_location_frozen(self):
        loc = GeodeticLocation(lat_deg=52.0, lon_deg=-5.0)
        with pytest.raises(AttributeError):
            loc.lat_deg = 0.0

    def test_horizontal_frozen(self):
        pos = HorizontalPosition(azimuth_deg=1.0, altitude_deg=2.0)
        with pytest.raises(AttributeError):
            pos.altitude_deg = 0.0


# ── Sidereal time and hour angle ──────────────────────────────────

class TestSiderealTime:

    def test_reference_value(self):
        """Sidereal time at 52°N 5°E on JD 2453097 is 14.8347°."""
        assert sidereal_time(_JD, _LON) == pytest.approx(14.8347, abs=1e-4)

    @pytest.mark.parametrize("jd", [2451545.0, 2453097.0, 2453097.73, 2400000.1, 2500000.9])
    @pytest.mark.parametrize("lon", [-180.0, -5.0, 0.0, 77.5, 180.0])
    def test_range(self, jd, lon):
        assert 0.0 <= sidereal_time(jd, lon) < 360.0

    def test_longitude_shifts_sidereal_time(self):
        """Subtracting longitude: 10° further east (more negative) adds 10°."""
        west = sidereal_time(_JD, 0.0)
        east = sidereal_time(_JD, -10.0)
        assert (east - west) % 360.0 == pytest.approx(10.0, abs=1e-9)


class TestHourAngle:

    def test_reference_value(self):
        """Hour angle at 52°N 5°E on JD 2453097 is 3.7698°."""
        assert hour_angle(_JD, _LON) == pytest.approx(3.7698, abs=1e-4)

    def test_is_sidereal_minus_right_ascension(self):
        ra = right_ascension(ecliptic_longitude_of_sun(_JD))
        assert hour_angle(_JD, _LON) == pytest.approx(sidereal_time(_JD, _LON) - ra, abs=1e-12)

    @pytest.mark.parametrize("hours", range(0, 24, 3))
    def test_not_normalized_but_bounded(self, hours):
        h = hour_angle(_JD + hours / 24.0, _LON)
        assert -180.0 <= h < 540.0


# ── Azimuth and altitude ──────────────────────────────────────────

class TestAzimuthAltitude:

    def test_azimuth_reference(self):
        assert azimuth(3.7698, _LAT, 4.7565) == pytest.approx(5.1111, abs=1e-4)

    def test_altitude_reference(self):
        assert altitude(3.7698, _LAT, 4.7565) == pytest.approx(42.6530, abs=1e-4)

    def test_meridian_altitude(self):
        """At H = 0 the altitude is 90 − |φ − δ|."""
        assert altitude(0.0, 52.0, 10.0) == pytest.approx(48.0, abs=1e-9)

    def test_meridian_azimuth_is_south(self):
        assert azimuth(0.0, 52.0, 10.0) == pytest.approx(0.0, abs=1e-12)

    def test_afternoon_sun_is_west(self):
        assert azimuth(45.0, 52.0, 10.0) > 0.0
        assert azimuth(-45.0, 52.0, 10.0) < 0.0

    @pytest.mark.parametrize("h", [-170.0, -90.0, 0.0, 45.0, 180.0, 400.0])
    @pytest.mark.parametrize("lat", [-90.0, -45.0, 0.0, 52.0, 90.0])
    @pytest.mark.parametrize("dec", [-23.44, 0.0, 23.44])
    def test_altitude_range(self, h, lat, dec):
        assert -90.0 <= altitude(h, lat, dec) <= 90.0


class TestClamping:

    @pytest.mark.parametrize("lat", [float(x) / 7.0 for x in range(-630, 631, 37)])
    def test_zenith_borderline_never_raises(self, lat):
        """φ = δ, H = 0 puts the asin argument at 1 ± a few ulp."""
        result = altitude(0.0, lat, lat)
        assert not math.isnan(result)
        assert result <= 90.0
        assert result == pytest.approx(90.0, abs=1e-5)

        phi = float(np.radians(lat))
        h = float(np.radians(0.0))
        raw = np.sin(phi) * np.sin(phi) + np.cos(phi) * np.cos(phi) * np.cos(h)
        if raw >= 1.0:
            assert result == 90.0

    def test_pole_is_exact(self):
        assert altitude(0.0, 90.0, 90.0) == 90.0
        assert altitude(0.0, 90.0, -90.0) == -90.0

    def test_nadir_is_exact(self):
        assert altitude(180.0, 0.0, 0.0) == -90.0

    def test_azimuth_at_pole_finite(self):
        assert math.isfinite(azimuth(10.0, 90.0, 90.0))


# ── Horizontal position ───────────────────────────────────────────

class TestHorizontalPosition:

    def test_matches_components(self):
        loc = GeodeticLocation(lat_deg=_LAT, lon_deg=_LON)
        pos = horizontal_position(_JD, loc)
        dec = declination(ecliptic_longitude_of_sun(_JD))
        h = hour_angle(_JD, _LON)
        assert pos.azimuth_deg == pytest.approx(azimuth(h, _LAT, dec), abs=1e-12)
        assert pos.altitude_deg == pytest.approx(altitude(h, _LAT, dec), abs=1e-12)

    def test_reference_instant(self):
        pos = horizontal_position(_JD, GeodeticLocation(lat_deg=_LAT, lon_deg=_LON))
        assert pos.azimuth_deg == pytest.approx(5.1111, abs=1e-3)
        assert pos.altitude_deg == pytest.approx(42.6530, abs=1e-3)
