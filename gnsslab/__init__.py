"""GNSS data processing: reference frames, coordinate conversion, LAMBDA ambiguity resolution, configuration files and satellite, ephemeris and observation data structures."""

__version__ = "1.2.0"