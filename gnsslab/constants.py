"""Mathematical, physical and signal constants for GNSS processing."""

import math

# Mathematical constants
PI = 3.1415926535897932384626433832795
PI2 = 2.0 * PI
RAD = PI / 180.0  # radians per degree
DEG = 180.0 / PI  # degrees per radian
ARCS = 3600.0 * 180.0 / PI  # arcseconds per radian

# GPS time constants
JAN61980 = 44244  # MJD of 1980-01-06
JAN11901 = 15385  # MJD of 1901-01-01
SECPERHOUR = 3600.0
SECPERDAY = 86400.0
SECPERWEEK = 604800.0

# Cumulative day counts at the start of each month
LEAP_MONTHS = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)
NORMAL_MONTHS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)

# General constants
C_LIGHT = 299792458.0  # speed of light [m/s]

# Earth parameters, WGS-84
R_WGS84 = 6378137.0
F_WGS84 = 1.0 / 298.257223563
OMEGA_WGS = 7.2921151467e-5  # earth rotation rate [rad/s]
GM_EARTH = 398600.5e9  # [m^3/s^2]
GM_JGM3 = 398600.4415e9  # [m^3/s^2]

# Earth parameters, CGCS2000
R_CGS2K = 6378137.0
F_CGS2K = 1.0 / 298.257222101
OMEGA_BDS = 7.2921150e-5
GM_BDS = 398600.4418e9

# GPS signal
FG1_GPS = 1575.42e6
FG2_GPS = 1227.60e6
FG12R = 77 / 60.0
FG12R2 = 5929 / 3600.0
WL1_GPS = C_LIGHT / FG1_GPS
WL2_GPS = C_LIGHT / FG2_GPS

# BeiDou signal
FG1_CPS = 1561.098e6
FG2_CPS = 1207.140e6
FG3_CPS = 1268.520e6
FC12R = FG1_CPS / FG2_CPS
FC12R2 = FC12R * FC12R
FC13R = FG1_CPS / FG3_CPS
FC13R2 = FC13R * FC13R
WL1_CPS = C_LIGHT / FG1_CPS
WL2_CPS = C_LIGHT / FG2_CPS
WL3_CPS = C_LIGHT / FG3_CPS

# Limits
GPST_BDT = 14  # GPS time minus BeiDou time [s]
MAXCHANNUM = 36
MAXSATNUM = 64
MAXGPSPRN = 32
MAXOBSTYPENUM = 9
MAXGEOPRN = 5
MAXBDSPRN = 63
MAXRAWLEN = 40960

assert math.isclose(PI, math.pi)