"""Exception hierarchy used throughout the package."""


class GnssLabError(Exception):
    """Base class for all errors raised by this package."""

    @property
    def message(self) -> str:
        return str(self)


class StringException(GnssLabError):
    """A string could not be handled as expected."""


class InvalidRequest(GnssLabError):
    """A request cannot be satisfied with the given input."""


class FFStreamError(GnssLabError):
    """A formatted file stream is malformed."""


class EndOfFile(GnssLabError):
    """The end of an input stream was reached."""


class FileMissingException(GnssLabError):
    """A required file could not be opened."""


class ConfigException(GnssLabError):
    """A configuration value is missing or invalid."""


class GeometryException(GnssLabError):
    """A geometric computation is undefined for the given input."""


class TypeIDNotFound(GnssLabError):
    """An observation type is not present."""


class SatIDNotFound(GnssLabError):
    """A satellite is not present."""


class NumberOfSatsMismatch(GnssLabError):
    """The number of satellites does not match what was expected."""


class NumberOfTypesMismatch(GnssLabError):
    """The number of observation types does not match what was expected."""


class SVNumException(GnssLabError):
    """Too few satellites are available for a solution."""


class InvalidSolver(GnssLabError):
    """The solver could not produce a valid solution."""


class SyncException(GnssLabError):
    """Two data streams could not be synchronised."""