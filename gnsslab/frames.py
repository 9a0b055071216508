"""Reference ellipsoids and Cartesian / geodetic coordinate types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .constants import C_LIGHT


class ReferenceFrame:
    """An Earth reference ellipsoid.

    Subclasses define ``a`` (semi-major axis, m), ``f`` (flattening),
    ``omega`` (rotation rate, rad/s) and ``gm`` (gravitational constant, m^3/s^2).
    """

    a: float
    f: float
    omega: float
    gm: float

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return 2.0 * self.f - self.f * self.f

    def j2(self) -> float:
        """Second zonal harmonic; only some frames define it."""
        raise NotImplementedError(
            f"j2 is not defined for the {type(self).__name__} reference frame."
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class WGS84(ReferenceFrame):
    """World Geodetic System 1984."""

    a = 6378137.0
    f = 1 / 298.257223563
    omega = 7.292115e-5
    gm = 3.986004418e14


class GPSEllipsoid(WGS84):
    """WGS84 with the constants used by GPS broadcast ephemerides."""

    ang_velocity = 7.2921151467e-5  # rad/s
    gps_gm = 3.986005e14  # m^3/s^2
    gps_gm_km = 3.9860034e5  # km^3/s^2
    c = C_LIGHT  # m/s
    c_km = C_LIGHT / 1000  # km/s


class CGCS2000(ReferenceFrame):
    """China Geodetic Coordinate System 2000, used by BeiDou."""

    a = 6378137.0
    f = 1 / 298.257222101
    omega = 7.292115e-5
    gm = 3.986004418e14


class PZ90(ReferenceFrame):
    """Parametry Zemli 1990, used by GLONASS."""

    a = 6378136.0
    f = 1 / 298.257839303
    omega = 7.2921150e-5
    gm = 3.9860044e14

    def j2(self) -> float:
        return 1.08262575e-3


@dataclass(frozen=True)
class XYZ:
    """Earth-centred, Earth-fixed Cartesian position in metres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vector(cls, vec) -> "XYZ":
        x, y, z = (float(v) for v in vec)
        return cls(x, y, z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __array__(self, dtype=None, copy=None):
        return np.array([self.x, self.y, self.z], dtype=dtype or float)

    def __sub__(self, other) -> np.ndarray:
        """Difference vector ``self - other`` as a numpy array."""
        return np.asarray(self, dtype=float) - np.asarray(other, dtype=float)

    def norm(self) -> float:
        """Euclidean length of the position vector."""
        return math.hypot(self.x, self.y, self.z)


@dataclass(frozen=True)
class BLH:
    """Geodetic position: latitude and longitude in radians, height in metres."""

    lat: float = 0.0
    lon: float = 0.0
    height: float = 0.0

    @classmethod
    def from_vector(cls, vec) -> "BLH":
        lat, lon, height = (float(v) for v in vec)
        return cls(lat, lon, height)

    def __iter__(self) -> Iterator[float]:
        yield self.lat
        yield self.lon
        yield self.height

    def __array__(self, dtype=None, copy=None):
        return np.array([self.lat, self.lon, self.height], dtype=dtype or float)