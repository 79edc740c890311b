"""Turning command-line arguments into the list of integers to sort."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")
_LEADING_INTEGER = re.compile(r"[ \f\n\r\t\v]*([+-]?)([0-9]*)")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""


def split_arguments(args: Iterable[str]) -> list[str]:
    """Split every argument on spaces and return the non-empty tokens in order."""
    return [token for arg in args for token in arg.split(" ") if token]


def is_number(token: str) -> bool:
    """Whether ``token`` is an optional sign followed by one or more digits."""
    return _NUMBER.fullmatch(token) is not None


def parse_integer(token: str) -> int:
    """Read the integer at the start of ``token``, as ``atoi`` does.

    Leading whitespace is skipped, one sign is accepted, and reading stops
    at the first non-digit. A token with no leading digits gives 0.
    """
    match = _LEADING_INTEGER.match(token)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Return the integers named by ``args``, checking them as a whole.

    Raises :class:`InputError` if a token is not a number, if a value does
    not fit a 32-bit signed integer, or if a value appears twice. No tokens
    at all gives an empty list.
    """
    tokens = split_arguments(args)
    bad = next((token for token in tokens if not is_number(token)), None)
    if bad is not None:
        raise InputError(f"not a number: {bad!r}")
    values = [parse_integer(token) for token in tokens]
    outside = next((v for v in values if not INT_MIN <= v <= INT_MAX), None)
    if outside is not None:
        raise InputError(f"out of range: {outside}")
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
    return values