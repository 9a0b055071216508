# gnsslab

Building blocks for GNSS data processing in Python:

- reference ellipsoids (`WGS84`, `GPSEllipsoid`, `CGCS2000`, `PZ90`) and the
  coordinate types `XYZ` (ECEF, metres) and `BLH` (latitude and longitude in
  radians, height in metres) in `gnsslab.frames`;
- conversion between `XYZ` and `BLH`, elevation and azimuth of a target seen
  from a station, and rotation into local east-north-up coordinates in
  `gnsslab.coords`;
- integer ambiguity resolution with the modified LAMBDA method in
  `gnsslab.lambda_ar`;
- a `key = value` configuration reader in `gnsslab.config`;
- satellite identifiers (`gnsslab.satid`), broadcast-ephemeris records with a
  nearest-epoch lookup (`gnsslab.ephemeris`) and in-memory RINEX-style
  observation containers (`gnsslab.observations`);
- forgiving number parsing (`gnsslab.strutils`), GNSS constants
  (`gnsslab.constants`) and an exception hierarchy rooted at
  `gnsslab.errors.GnssLabError`.

## Installation

```
pip install .
```

The package needs Python 3.10 or later and numpy.

## Command-line tools

```
gnsslab-calc 3 + 4
```
A four-function calculator taking `<num1> <operation> <num2>`, where the
operation is one of `+`, `-`, `*`, `/`. It prints `Result: <value>`. A wrong
number of arguments, an unknown operation or a division by zero is reported
on standard error with exit status 1.

```
gnsslab-parse-config spp.ini
```
Reads a configuration file of `key = value` lines and prints the `GPS`,
`navFile`, `BD2`, `noiseGPSCode` and `noiseGLO` entries. A missing key or an
invalid value is reported on standard error with exit status 1.

```
gnsslab-coord-convert
```
Converts three sample points (north pole, south pole and a mid-latitude
point) from XYZ to BLH in the PZ-90 frame, and the mid-latitude point in
WGS84, printing each result with 14 decimals.

```
gnsslab-lambda
```
Resolves a built-in sample of six double-differenced float ambiguities to
integers and prints the float values, the fixed values and the ratio.

## Library use

### Coordinates

```python
from gnsslab.frames import WGS84, XYZ
from gnsslab.coords import xyz_to_blh, blh_to_xyz, elevation, azimuth, ecef_to_enu

station = XYZ(4081945.67, 2187689.34, 4767321.89)
blh = xyz_to_blh(station, WGS84())        # BLH(lat, lon, height)

satellite = XYZ(15000000.0, 8000000.0, 20000000.0)
print(elevation(station, satellite))      # degrees
print(azimuth(station, satellite))        # degrees in [0, 360)
print(ecef_to_enu(station, satellite))    # numpy array: east, north, up
```

`xyz_to_blh` raises `GeometryException` if the latitude iteration does not
converge. `elevation` raises `InvalidRequest` and `azimuth` raises
`GeometryException` when the two positions are within 0.1 mm of each other.
`xyz_to_blh_fixed` and `blh_to_xyz` take the ellipsoid radius and flattening
directly; `enu_rotation` gives the ECEF to east-north-up rotation matrix.

Only `PZ90` defines `j2()`; the other frames raise `NotImplementedError`.

### Ambiguity resolution

```python
from gnsslab.lambda_ar import ARLambda

resolver = ARLambda()
fixed = resolver.resolve(float_ambiguities, covariance)  # numpy arrays
if resolver.is_fixed(3.0):
    print(fixed, resolver.squared_ratio)
```

`resolve` raises `InvalidRequest` when the vector and matrix sizes do not
match and `InvalidSolver` when the covariance matrix is not positive
definite. The lower-level steps `factorize`, `reduction`, `search` and
`lambda_search` are available as functions.

### Configuration files

```python
from gnsslab.config import ConfigReader

config = ConfigReader("spp.ini")
use_gps = config.get_bool("GPS")
nav_file = config.get_str("navFile")
noise = config.get_float("noiseGPSCode")
count = config.get_int("GPS")
```

Lines starting with `#` and blank lines are ignored, as are lines without
`=`; a later key overrides an earlier one. A file that cannot be opened
raises `FileMissingException`; a missing key or a value of the wrong kind
raises `ConfigException`.

### Satellites, ephemerides and observations

```python
from gnsslab.satid import SatID
from gnsslab.ephemeris import GPSTime, SatelliteID, SatelliteSystem, find_nearest_epoch

sat = SatID.parse("G15")          # SatID(system="G", id=15); str(sat) == "G15"
assert SatID.parse("C03") < sat   # ordered by system, then number

records = {SatelliteID(SatelliteSystem.GPS, 1): [...]}  # GPSEphemerisData lists
nearest = find_nearest_epoch(records, SatelliteID(SatelliteSystem.GPS, 1), GPSTime(2137, 6000))
```

`find_nearest_epoch` returns `None` for a satellite without records.
`gnsslab.observations.RinexFile` holds a `RinexHeader` and a list of
`ObservationRecord`s; `summary()` and `details()` return the contents as
text.

## What the package does not do

It does not read or write RINEX files, compute satellite positions or clocks
from ephemerides, convert between time systems, decode receiver data
streams, or produce point-positioning or RTK solutions. The observation and
ephemeris types are in-memory containers only.

## Running the tests

```
pip install .[test]
pytest
```