[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "gnsslab"
version = "1.2.0"
description = "GNSS data processing building blocks: reference frames, coordinate conversion, LAMBDA ambiguity resolution, configuration files and RINEX-style data structures"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "gnss",
    "gps",
    "beidou",
    "geodesy",
    "coordinates",
    "lambda",
    "ambiguity-resolution",
    "rinex",
    "ephemeris",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gnsslab-calc = "gnsslab.calculator:main"
gnsslab-parse-config = "gnsslab.config:main"
gnsslab-coord-convert = "gnsslab.coords:main"
gnsslab-lambda = "gnsslab.lambda_ar:main"

[tool.setuptools.packages.find]
include = ["gnsslab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
