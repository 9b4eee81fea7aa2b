"""Reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647


class InputError(ValueError):
    """An argument that is not a list of whole numbers in range."""


def _parse_token(token: str) -> int:
    try:
        number = int(token)
    except ValueError:
        raise InputError(f"not an integer: {token!r}") from None
    if str(number) != token:
        raise InputError(f"not a plain integer: {token!r}")
    if not INT_MIN <= number <= INT_MAX:
        raise InputError(f"integer out of range: {token!r}")
    return number


def parse_argument(text: str) -> list[int]:
    """Split one argument on spaces and return its numbers.

    Each word must be written exactly as the number prints: an optional
    minus sign and digits, no leading zeros or plus sign, and within the
    range of a 32-bit signed integer. An argument with no words is an error.
    """
    tokens = [token for token in text.split(" ") if token]
    if not tokens:
        raise InputError("empty argument")
    return [_parse_token(token) for token in tokens]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Return the numbers of all arguments, in order."""
    numbers: list[int] = []
    for text in args:
        numbers.extend(parse_argument(text))
    return numbers