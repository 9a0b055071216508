"""Broadcast ephemeris records and nearest-epoch lookup."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .constants import SECPERWEEK


class SatelliteSystem(enum.Enum):
    """Satellite navigation systems."""

    GPS = 0
    GLONASS = 1
    GALILEO = 2
    BEIDOU = 3


@dataclass(frozen=True)
class SatelliteID:
    """A satellite within a system, identified by its PRN or slot number."""

    system: SatelliteSystem
    prn: int


@dataclass(frozen=True)
class GPSTime:
    """GPS week and seconds of week."""

    week: int
    tow: float

    def time_difference(self, other):
        """Absolute difference in seconds from ``other``."""
        return abs((self.week - other.week) * SECPERWEEK + self.tow - other.tow)


@dataclass
class GPSEphemerisData:
    """A simplified set of GPS broadcast ephemeris parameters."""

    time: GPSTime
    toe: float
    af0: float
    af1: float
    af2: float
    iode: float
    iodc: float
    m0: float
    delta_n: float
    e: float
    sqrt_a: float
    omega0: float
    i0: float
    w: float


def find_nearest_epoch(ephemeris_map, satellite_id, target_time):
    """Return the record of ``satellite_id`` closest in time to ``target_time``.

    On ties the first record wins. Returns None if the satellite has no records.
    """
    records = ephemeris_map.get(satellite_id)
    if not records:
        return None
    return min(records, key=lambda rec: rec.time.time_difference(target_time))