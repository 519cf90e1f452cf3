"""Reading and validating the integers given on the command line."""

from __future__ import annotations

import re
from typing import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[+-]?[0-9]+")
_LEADING = re.compile(r"[ \t\n\r\f\v]*([+-]?)([0-9]*)")


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def has_syntax_error(text: str) -> bool:
    """Tell whether ``text`` is not an optional sign followed by digits."""
    return _NUMBER.fullmatch(text) is None


def parse_long(text: str) -> int:
    """Read the leading integer of ``text``, as far as the digits go."""
    match = _LEADING.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    number = int(digits)
    return -number if sign == "-" else number


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn arguments into distinct integers; a single argument is split on spaces."""
    words = split_words(args[0]) if len(args) == 1 else list(args)
    numbers: list[int] = []
    seen: set[int] = set()
    for word in words:
        number = parse_long(word)
        if has_syntax_error(word) or not INT_MIN <= number <= INT_MAX or number in seen:
            raise InputError()
        seen.add(number)
        numbers.append(number)
    return numbers