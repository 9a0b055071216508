"""Reader for simple ``key = value`` configuration files."""

import sys

from .errors import ConfigException, FileMissingException, GnssLabError
from .strutils import _stod, _stoi

_WHITESPACE = " \t\n\r\f\v"

_USAGE = (
    " Parse configuration data from file! \n"
    " Usages: \n"
    "    parse_config [your_config_file] \n"
    " Examples: \n"
    "    parse_config ../examples/spp.ini \n"
)


class ConfigReader:
    """Key/value settings read from a file.

    Lines starting with ``#`` (after leading whitespace) and blank lines are
    ignored, as are lines without ``=``. Later keys override earlier ones.
    """

    def __init__(self, filename):
        self._values: dict[str, str] = {}
        try:
            with open(filename, encoding="utf-8") as handle:
                for raw in handle:
                    self._parse_line(raw.rstrip("\n"))
        except OSError as exc:
            raise FileMissingException(f"Unable to open file: {filename}") from exc

    def _parse_line(self, line: str) -> None:
        line = line.lstrip(_WHITESPACE)
        if not line or line.startswith("#"):
            return
        key, sep, value = line.partition("=")
        if not sep:
            return
        self._values[key.rstrip(_WHITESPACE)] = value.lstrip(_WHITESPACE)

    def _lookup(self, key: str) -> str:
        try:
            return self._values[key]
        except KeyError:
            raise ConfigException(f"Key not found: {key}") from None

    @staticmethod
    def _to_int(text: str) -> int:
        try:
            return _stoi(text)
        except (ValueError, OverflowError):
            raise ConfigException(f"Invalid integer value: {text}") from None

    @staticmethod
    def _to_float(text: str) -> float:
        try:
            return _stod(text)
        except (ValueError, OverflowError):
            raise ConfigException(f"Invalid double value: {text}") from None

    def get_int(self, key):
        """Return the value of ``key`` as an integer."""
        return self._to_int(self._lookup(key))

    def get_str(self, key):
        """Return the value of ``key`` as text."""
        return self._lookup(key)

    def get_bool(self, key):
        """Return the value of ``key`` as a boolean ("1", "true" or a non-zero integer)."""
        value = self._lookup(key)
        return value in ("1", "true") or self._to_int(value) != 0

    def get_float(self, key):
        """Return the value of ``key`` as a float."""
        return self._to_float(self._lookup(key))


def main(argv=None):
    """Print selected settings of a configuration file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("ERROR: you must input config file !")
        print(_USAGE)
        return 1

    try:
        reader = ConfigReader(args[0])
    except GnssLabError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 0

    try:
        gps = reader.get_int("GPS")
        nav_file = reader.get_str("navFile")
        bd2 = reader.get_bool("BD2")
        noise_gps = reader.get_float("noiseGPSCode")

        print(f"GPS: {gps}")
        print(f"Nav File: {nav_file}")
        print(f"BD2: {int(bd2)}")
        print(f"Noise of GPS Code: {noise_gps:g}")

        noise_glo = reader.get_float("noiseGLO")
        print(f"{noise_glo:g}")
    except ConfigException as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())