"""Whitespace trimming and forgiving number parsing."""

import re
import sys

_WHITESPACE = " \t\n\r\f\v"
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\r\f\v]*"
    r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")


def _stod(text: str) -> float:
    """Parse the leading floating-point number of ``text``.

    Raises ValueError when no number is found and OverflowError when the
    value is out of the range of a double.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    token = match.group(1)
    value = float(token)
    if value in (float("inf"), float("-inf")) and "inf" not in token.lower():
        raise OverflowError(f"value out of range: {token}")
    if value == 0.0:
        mantissa = re.split("[eE]", token)[0]
        if any(ch in "123456789" for ch in mantissa):
            raise OverflowError(f"value out of range: {token}")
    return value


def _stoi(text: str) -> int:
    """Parse the leading 32-bit integer of ``text``.

    Raises ValueError when no integer is found and OverflowError when it
    does not fit in 32 bits.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"integer out of range: {match.group(1)}")
    return value


def strip(s: str) -> str:
    """Remove leading and trailing whitespace."""
    return s.strip(_WHITESPACE)


def strip_trailing(line: str) -> str:
    """Remove trailing whitespace."""
    return line.rstrip(_WHITESPACE)


def safe_stod(text: str, default: float = 0.0) -> float:
    """Parse a float, returning ``default`` for blank or invalid text.

    A value out of the range of a double yields the largest finite double.
    """
    if not text.strip(" "):
        return default
    try:
        return _stod(text)
    except OverflowError:
        return sys.float_info.max
    except ValueError:
        return default


def safe_stoi(text: str) -> int:
    """Parse an integer, returning 0 for blank, invalid or out-of-range text."""
    trimmed = text.strip(_WHITESPACE)
    if not trimmed:
        return 0
    try:
        return _stoi(trimmed)
    except (ValueError, OverflowError):
        return 0