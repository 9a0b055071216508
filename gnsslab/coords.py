"""Conversions between Cartesian, geodetic and local topocentric coordinates."""

from __future__ import annotations

import math
import sys

import numpy as np

from .constants import F_CGS2K, R_CGS2K
from .errors import GeometryException, GnssLabError, InvalidRequest
from .frames import BLH, PZ90, WGS84, XYZ, ReferenceFrame

_POLE_EPS = 1.0e-13
_MAX_ITERATIONS = 100
_MIN_SEPARATION = 1e-4


def _components(vec) -> tuple[float, float, float]:
    x, y, z = (float(v) for v in vec)
    return x, y, z


def xyz_to_blh(xyz, frame: ReferenceFrame) -> BLH:
    """Convert a Cartesian position to geodetic coordinates on ``frame``.

    Raises GeometryException if the latitude iteration does not converge.
    """
    x, y, z = _components(xyz)
    a = frame.a
    e2 = frame.e2
    rho = math.sqrt(x * x + y * y)

    if rho < _POLE_EPS:
        lat = math.pi / 2 if z > 0 else -math.pi / 2
        return BLH(lat, 0.0, abs(z) - a * math.sqrt(1 - e2))

    b0 = math.atan2(z, rho)
    iterations = 0
    while True:
        sin_b0 = math.sin(b0)
        n = a / math.sqrt(1 - e2 * sin_b0 * sin_b0)
        b1 = math.atan2(z + e2 * n * sin_b0, rho)
        if abs(b1 - b0) < _POLE_EPS:
            break
        b0 = b1
        iterations += 1
        if iterations > _MAX_ITERATIONS:
            raise GeometryException("Iteration did not converge.")

    lon = math.atan2(y, x)
    height = rho / math.cos(b1) - n
    return BLH(b1, lon, height)


def _slant(ref, target) -> np.ndarray:
    return np.asarray(_components(target)) - np.asarray(_components(ref))


def elevation(ref, target) -> float:
    """Elevation in degrees of ``target`` as seen from ``ref`` on WGS84."""
    blh = xyz_to_blh(ref, WGS84())
    lat, lon = blh.lat, blh.lon

    slant = _slant(ref, target)
    distance = float(np.linalg.norm(slant))
    if distance <= _MIN_SEPARATION:
        raise InvalidRequest("Positions are within .1 millimeter")

    up = np.array(
        [math.cos(lat) * math.cos(lon), math.cos(lat) * math.sin(lon), math.sin(lat)]
    )
    cos_up = float(slant @ up) / distance
    cos_up = max(-1.0, min(1.0, cos_up))
    return 90.0 - math.degrees(math.acos(cos_up))


def azimuth(ref, target) -> float:
    """Azimuth in degrees, in [0, 360), of ``target`` as seen from ``ref`` on WGS84.

    Returns 0 when the target is (numerically) straight overhead.
    """
    blh = xyz_to_blh(ref, WGS84())
    lat, lon = blh.lat, blh.lon

    slant = _slant(ref, target)
    distance = float(np.linalg.norm(slant))
    if distance <= _MIN_SEPARATION:
        raise GeometryException("azimuthGeodetic::Positions are within .1 millimeter")

    north = np.array(
        [-math.sin(lat) * math.cos(lon), -math.sin(lat) * math.sin(lon), math.cos(lat)]
    )
    east = np.array([-math.sin(lon), math.cos(lon), 0.0])

    local_n = float(slant @ north) / distance
    local_e = float(slant @ east) / distance
    if abs(local_n) + abs(local_e) < 1.0e-16:
        return 0.0

    alpha = math.degrees(math.atan2(local_e, local_n))
    return alpha + 360.0 if alpha < 0.0 else alpha


def xyz_to_blh_fixed(xyz, radius: float, flattening: float) -> BLH:
    """Convert Cartesian to geodetic coordinates with at most ten iterations.

    The origin maps to latitude, longitude and height zero.
    """
    x, y, z = _components(xyz)
    e2 = flattening * (2.0 - flattening)
    rho2 = x * x + y * y
    dz_new = e2 * z
    n = 0.0

    for _ in range(10):
        dz = dz_new
        zdz = z + dz
        nh = math.sqrt(rho2 + zdz * zdz)
        if nh < 1.0:
            break
        sin_phi = zdz / nh
        n = radius / math.sqrt(1.0 - e2 * sin_phi * sin_phi)
        dz_new = n * e2 * sin_phi
        if abs(dz - dz_new) <= 1e-8:
            break

    return BLH(math.atan2(zdz, math.sqrt(rho2)), math.atan2(y, x), nh - n)


def blh_to_xyz(blh, radius: float, flattening: float) -> XYZ:
    """Convert geodetic coordinates (radians, metres) to a Cartesian position."""
    lat, lon, height = _components(blh)
    e2 = flattening * (2.0 - flattening)
    cos_lat = math.cos(lat)
    sin_lat = math.sin(lat)
    n = radius / math.sqrt(1.0 - e2 * sin_lat * sin_lat)
    return XYZ(
        (n + height) * cos_lat * math.cos(lon),
        (n + height) * cos_lat * math.sin(lon),
        ((1.0 - e2) * n + height) * sin_lat,
    )


def enu_rotation(blh) -> np.ndarray:
    """Rotation matrix from ECEF to east-north-up at the given latitude/longitude."""
    lat, lon = (float(v) for v in list(blh)[:2])
    sinp, cosp = math.sin(lat), math.cos(lat)
    sinl, cosl = math.sin(lon), math.cos(lon)
    return np.array(
        [
            [-sinl, cosl, 0.0],
            [-sinp * cosl, -sinp * sinl, cosp],
            [cosp * cosl, cosp * sinl, sinp],
        ]
    )


def ecef_to_enu(pos, r) -> np.ndarray:
    """East-north-up offset of ECEF point ``r`` from ECEF reference ``pos`` (CGCS2000)."""
    blh = xyz_to_blh_fixed(pos, R_CGS2K, F_CGS2K)
    offset = np.asarray(_components(r)) - np.asarray(_components(pos))
    return enu_rotation(blh) @ offset


def _format(blh: BLH) -> str:
    return f"{blh.lat:.14f}, {blh.lon:.14f}, {blh.height:.14f}"


def main(argv=None):
    """Convert sample positions to geodetic coordinates on PZ-90 and WGS84."""
    north_pole = XYZ(0.0, 0.0, 6356752.314)
    south_pole = XYZ(0.0, 0.0, -6356752.314)
    normal = XYZ(4081945.67, 2187689.34, 4767321.89)
    wgs84 = WGS84()
    pz90 = PZ90()

    try:
        print()
        print(f"PZ-90  north_pole (B, L, H): {_format(xyz_to_blh(north_pole, pz90))}")
        print(f"PZ-90  south_pole (B, L, H): {_format(xyz_to_blh(south_pole, pz90))}")
        print(f"PZ-90  normal_point  (B, L, H): {_format(xyz_to_blh(normal, pz90))}")
        print(f"WGS84  normal_point  (B, L, H): {_format(xyz_to_blh(normal, wgs84))}")
    except GnssLabError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())