# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for ecliptic and equatorial coordinates of the Sun."""
from datetime import datetime, timezone

import pytest

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
from sunpath.domain.orbital_elements import SOLAR_CONSTANTS, SolarConstants
from sunpath.domain.time_scale import datetime_to_julian


# ── Ecliptic ──────────────────────────────────────────────────────

class TestEclipticLongitude:

    def test_mean_longitude_adds_perihelion(self):
        assert mean_longitude(87.1807) == pytest.approx(87.1807 + 102.9373, abs=1e-12)

    def test_mean_longitude_of_sun(self):
        """Mean longitude of the Sun is 87.1807 + 102.9373 + 180 for JD 2453097."""
        assert mean_longitude_of_sun(2453097) == pytest.approx(87.1807 + 102.9373 + 180, abs=1e-4)

    def test_reference_jd_2453097(self):
        """Ecliptic longitude of the Sun on JD 2453097 is 12.0322°."""
        assert ecliptic_longitude_of_sun(2453097) == pytest.approx(12.0322, abs=1e-4)

    @pytest.mark.parametrize("day", range(0, 400, 23))
    def test_range(self, day):
        assert 0.0 <= ecliptic_longitude_of_sun(2453000.0 + day) < 360.0

    def test_position_wrapper(self):
        pos = ecliptic_position(2453097)
        assert isinstance(pos, EclipticPosition)
        assert pos.longitude_deg == ecliptic_longitude_of_sun(2453097)
        with pytest.raises(AttributeError):
            pos.longitude_deg = 0.0

    def test_advances_about_one_degree_per_day(self):
        delta = ecliptic_longitude_of_sun(2453098) - ecliptic_longitude_of_sun(2453097)
        assert 0.95 < delta < 1.02


# ── Equatorial ────────────────────────────────────────────────────

class TestEquatorial:

    def test_right_ascension_reference(self):
        """Right ascension for λ = 12.0322° is 11.0649°."""
        assert right_ascension(12.0322) == pytest.approx(11.0649, abs=1e-4)

    def test_declination_reference(self):
        """Declination for λ = 12.0322° is 4.7565°."""
        assert declination(12.0322) == pytest.approx(4.7565, abs=1e-4)

    @pytest.mark.parametrize("lam", [0.0, 90.0, 180.0, 270.0])
    def test_cardinal_points(self, lam):
        """At the equinoxes and solstices RA equals λ (mod 360)."""
        assert right_ascension(lam) % 360.0 == pytest.approx(lam, abs=1e-9)

    def test_solstice_declination_is_obliquity(self):
        assert declination(90.0) == pytest.approx(23.4393, abs=1e-9)
        assert declination(270.0) == pytest.approx(-23.4393, abs=1e-9)

    @pytest.mark.parametrize("lam", [float(x) for x in range(-360, 720, 17)])
    def test_declination_bounded_by_obliquity(self, lam):
        assert -23.44 <= declination(lam) <= 23.44

    def test_zero_obliquity_collapses_frames(self):
        flat = SolarConstants(obliquity_deg=0.0)
        assert declination(123.0, flat) == pytest.approx(0.0, abs=1e-12)
        assert right_ascension(123.0, flat) == pytest.approx(123.0, abs=1e-9)

    def test_position_wrapper(self):
        pos = equatorial_position(12.0322)
        assert isinstance(pos, EquatorialPosition)
        assert pos.right_ascension_deg == right_ascension(12.0322)
        assert pos.declination_deg == declination(12.0322)


# ── Seasons ───────────────────────────────────────────────────────

class TestSeasons:

    def test_summer_solstice_declination(self):
        jd = datetime_to_julian(datetime(2004, 6, 21, 12, tzinfo=timezone.utc))
        dec = declination(ecliptic_longitude_of_sun(jd))
        assert dec == pytest.approx(SOLAR_CONSTANTS.obliquity_deg, abs=0.05)

    def test_vernal_equinox_declination(self):
        jd = datetime_to_julian(datetime(2004, 3, 20, 7, tzinfo=timezone.utc))
        assert abs(declination(ecliptic_longitude_of_sun(jd))) < 0.1
