"""A command-line four-function calculator."""

from __future__ import annotations

import operator
import sys

from .strutils import safe_stod

_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def calculate(num1, operation, num2):
    """Apply ``operation`` (one of + - * /) to two numbers.

    Raises ValueError for an unknown operation or division by zero.
    """
    try:
        func = _OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"Invalid operation: {operation}") from None
    if operation == "/" and num2 == 0:
        raise ValueError("Division by zero is not allowed.")
    return func(float(num1), float(num2))


def main(argv=None):
    """Run ``calculator <num1> <operation> <num2>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("Usage: calculator <num1> <operation> <num2>", file=sys.stderr)
        print("Operations: +, -, *, /", file=sys.stderr)
        return 1

    num1 = safe_stod(args[0])
    num2 = safe_stod(args[2])
    operation = args[1]

    if operation not in _OPERATIONS:
        print(f"Invalid operation: {operation}", file=sys.stderr)
        return 1
    try:
        result = calculate(num1, operation, num2)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())