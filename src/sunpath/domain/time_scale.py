# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Calendar time ↔ Julian day count.

The Julian day count is UTC-referenced: the same physical instant maps to the
same day number whatever zone it was read in. Timezone offsets are given in
minutes east of Greenwich, the sign used by ``datetime.utcoffset``.
"""
from datetime import datetime, timedelta, timezone

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

UNIX_EPOCH_JD: float = 2440587.5
"""Julian Date of 1970-01-01T00:00:00 UTC."""

J2000_JD: float = 2451545.0
"""Julian Date of J2000.0 epoch."""

_MS_PER_DAY: int = 86_400_000

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _fixed_zone(tz_offset_minutes: float) -> timezone:
    return timezone(timedelta(minutes=tz_offset_minutes))


# --------------------------------------------------------------------------- #
# Conversions
# --------------------------------------------------------------------------- #

def datetime_to_julian(moment: datetime, tz_offset_minutes: float = 0.0) -> float:
    """Convert a calendar instant to a Julian day count.

    Args:
        moment: Calendar instant. A naive value is a wall-clock reading at
            UTC + ``tz_offset_minutes``; an aware value already names its
            instant and the offset argument does not apply to it.
        tz_offset_minutes: Zone of a naive ``moment``, minutes east of UTC.

    Returns:
        Julian day count (UTC-referenced).
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=_fixed_zone(tz_offset_minutes))

    return (moment - _UNIX_EPOCH) / timedelta(days=1) + UNIX_EPOCH_JD


def julian_to_datetime(jd: float, tz_offset_minutes: float = 0.0) -> datetime:
    """Convert a Julian day count back to a calendar instant.

    Inverse of :func:`datetime_to_julian` for the same offset. The result is
    resolved to the millisecond, which is what a float day count near the
    present epoch can represent faithfully.

    Args:
        jd: Julian day count.
        tz_offset_minutes: Zone of the returned value, minutes east of UTC.

    Returns:
        Aware datetime in the fixed zone UTC + ``tz_offset_minutes``.
    """
    elapsed_ms = round((jd - UNIX_EPOCH_JD) * _MS_PER_DAY)
    utc = _UNIX_EPOCH + timedelta(milliseconds=elapsed_ms)
    return utc.astimezone(_fixed_zone(tz_offset_minutes))


def days_since_j2000(jd: float, epoch_jd: float = J2000_JD) -> float:
    """Days elapsed since J2000.0 (2000-01-01 12:00:00), or since epoch_jd."""
    return jd - epoch_jd
