import math

import numpy as np
import pytest

from gnsslab.constants import F_CGS2K, F_WGS84, R_CGS2K, R_WGS84
from gnsslab.coords import (
    azimuth,
    blh_to_xyz,
    ecef_to_enu,
    elevation,
    enu_rotation,
    main,
    xyz_to_blh,
    xyz_to_blh_fixed,
)
from gnsslab.errors import GeometryException, InvalidRequest
from gnsslab.frames import BLH, PZ90, WGS84, XYZ

NORMAL = XYZ(4081945.67, 2187689.34, 4767321.89)
EQUATOR = XYZ(R_WGS84, 0.0, 0.0)


def test_north_pole():
    blh = xyz_to_blh(XYZ(0.0, 0.0, 6356752.314245), WGS84())
    assert blh.lat == math.pi / 2
    assert blh.lon == 0.0
    assert abs(blh.height) < 1e-3


def test_south_pole():
    blh = xyz_to_blh(XYZ(0.0, 0.0, -6356752.314), PZ90())
    assert blh.lat == -math.pi / 2
    assert blh.lon == 0.0


def test_round_trip_wgs84():
    blh = xyz_to_blh(NORMAL, WGS84())
    back = blh_to_xyz(blh, R_WGS84, F_WGS84)
    assert np.allclose(np.asarray(back), np.asarray(NORMAL), atol=1e-6)


def test_round_trip_from_geodetic():
    start = BLH(0.6, -1.2, 250.0)
    xyz = blh_to_xyz(start, R_WGS84, F_WGS84)
    blh = xyz_to_blh(xyz, WGS84())
    assert blh.lat == pytest.approx(start.lat, abs=1e-12)
    assert blh.lon == pytest.approx(start.lon, abs=1e-12)
    assert blh.height == pytest.approx(start.height, abs=1e-6)


def test_equator_point_has_zero_latitude_and_height():
    blh = xyz_to_blh(EQUATOR, WGS84())
    assert blh.lat == pytest.approx(0.0, abs=1e-15)
    assert blh.lon == 0.0
    assert blh.height == pytest.approx(0.0, abs=1e-6)


def test_fixed_iteration_agrees_with_frame_version():
    a = xyz_to_blh(NORMAL, WGS84())
    b = xyz_to_blh_fixed(NORMAL, R_WGS84, F_WGS84)
    assert b.lat == pytest.approx(a.lat, abs=1e-10)
    assert b.lon == pytest.approx(a.lon, abs=1e-15)
    assert b.height == pytest.approx(a.height, abs=1e-4)


def test_fixed_iteration_origin():
    blh = xyz_to_blh_fixed(XYZ(), R_CGS2K, F_CGS2K)
    assert (blh.lat, blh.lon, blh.height) == (0.0, 0.0, 0.0)


def test_elevation_straight_up():
    ref = blh_to_xyz(BLH(0.7, 0.3, 0.0), R_WGS84, F_WGS84)
    target = blh_to_xyz(BLH(0.7, 0.3, 1000.0), R_WGS84, F_WGS84)
    assert elevation(ref, target) == pytest.approx(90.0, abs=1e-4)


def test_elevation_horizontal_at_equator():
    target = XYZ(R_WGS84, 1000.0, 0.0)
    assert elevation(EQUATOR, target) == pytest.approx(0.0, abs=1e-9)


def test_elevation_same_position_raises():
    with pytest.raises(InvalidRequest):
        elevation(NORMAL, NORMAL)


def test_azimuth_north_and_east():
    north = XYZ(R_WGS84, 0.0, 1000.0)
    east = XYZ(R_WGS84, 1000.0, 0.0)
    west = XYZ(R_WGS84, -1000.0, 0.0)
    assert azimuth(EQUATOR, north) == pytest.approx(0.0, abs=1e-9)
    assert azimuth(EQUATOR, east) == pytest.approx(90.0, abs=1e-9)
    assert azimuth(EQUATOR, west) == pytest.approx(270.0, abs=1e-9)


def test_azimuth_overhead_is_zero():
    assert azimuth(EQUATOR, XYZ(R_WGS84 + 1000.0, 0.0, 0.0)) == 0.0


def test_azimuth_same_position_raises():
    with pytest.raises(GeometryException):
        azimuth(NORMAL, NORMAL)


def test_enu_rotation_is_orthonormal():
    rot = enu_rotation(BLH(0.8, 2.1, 0.0))
    assert np.allclose(rot @ rot.T, np.eye(3))
    assert np.linalg.det(rot) == pytest.approx(1.0)


def test_ecef_to_enu_zero_offset():
    assert np.allclose(ecef_to_enu(NORMAL, NORMAL), np.zeros(3))


def test_ecef_to_enu_at_equator():
    pos = XYZ(R_CGS2K, 0.0, 0.0)
    assert np.allclose(ecef_to_enu(pos, XYZ(R_CGS2K, 0.0, 10.0)), [0.0, 10.0, 0.0])
    assert np.allclose(ecef_to_enu(pos, XYZ(R_CGS2K, 10.0, 0.0)), [10.0, 0.0, 0.0])
    assert np.allclose(ecef_to_enu(pos, XYZ(R_CGS2K + 10.0, 0.0, 0.0)), [0.0, 0.0, 10.0])


def test_enu_preserves_distance():
    target = XYZ(NORMAL.x + 12.0, NORMAL.y - 7.0, NORMAL.z + 3.0)
    enu = ecef_to_enu(NORMAL, target)
    assert float(np.linalg.norm(enu)) == pytest.approx((target - NORMAL).tolist() and float(np.linalg.norm(target - NORMAL)))


def test_main_prints_conversions(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "PZ-90  north_pole (B, L, H): " in out
    assert "WGS84  normal_point  (B, L, H): " in out
    assert f"{math.pi / 2:.14f}" in out
    assert f"{-math.pi / 2:.14f}" in out