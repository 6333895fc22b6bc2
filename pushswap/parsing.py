"""Reading the stack's numbers from command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\f\v\r"
_DIGITS = "0123456789"
_SIGNS = "+-"


class PushSwapError(ValueError):
    """Raised for any input the program refuses; reported to the user as ``error``."""

    def __init__(self, message: str = "error") -> None:
        super().__init__(message)


def _is_digit(char: str) -> bool:
    return len(char) == 1 and char in _DIGITS


def parse_int(text: str) -> int:
    """Strictly parse a 32-bit integer.

    Leading whitespace and one sign are allowed; everything after them must be
    a digit. A bare sign or an empty string reads as 0.
    """
    body = text.lstrip(_WHITESPACE)
    negative = False
    if body[:1] == "-":
        negative = True
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]
    if not all(_is_digit(char) for char in body):
        raise PushSwapError(f"not an integer: {text!r}")
    value = int(body) if body else 0
    if negative:
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        raise PushSwapError(f"out of range: {text!r}")
    return value


def lenient_atoi(text: str) -> int:
    """Parse a leading integer, stopping at the first non-digit.

    A value that grows past the 32-bit range gives -1 when too large and 0
    when too small.
    """
    body = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    result = 0
    for char in body:
        if not _is_digit(char):
            break
        result = result * 10 + int(char)
        if result * sign > INT_MAX:
            return -1
        if result * sign < INT_MIN:
            return 0
    return result * sign


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split on a separator character, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def check_error(args: Sequence[str]) -> bool:
    """Check the placement of signs, digits and spaces in each argument.

    A sign must be followed by a digit, and a digit by a digit, a space or the
    end of the argument.
    """
    for arg in args:
        j = 0
        length = len(arg)
        while j < length:
            char = arg[j]
            if char in _SIGNS:
                j += 1
                if j >= length or not _is_digit(arg[j]):
                    return False
            elif _is_digit(char):
                j += 1
                if j >= length:
                    break
                if not _is_digit(arg[j]) and arg[j] != " ":
                    return False
            j += 1
    return True


def check_args(args: Sequence[str]) -> bool:
    """Validate arguments: only digits and signs are allowed, in a sane layout.

    Raises ``PushSwapError`` on any other character; returns the result of
    :func:`check_error` otherwise.
    """
    for arg in args:
        if any(not (_is_digit(char) or char in _SIGNS) for char in arg):
            raise PushSwapError(f"invalid character in {arg!r}")
    return check_error(args)


def parse_quoted(args: Sequence[str]) -> list[int]:
    """Read numbers from the first argument split on spaces.

    The first word is skipped, as it would hold the program name; the rest
    are read with :func:`lenient_atoi`.
    """
    if not args:
        raise PushSwapError("no arguments")
    words = split_words(args[0], " ")
    return [lenient_atoi(word) for word in words[1:]]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Read the stack from the arguments, top first.

    A single argument is split on spaces; several arguments each hold one
    number. Every number is read with :func:`parse_int`.
    """
    if not args:
        raise PushSwapError("no arguments")
    if len(args) == 1:
        return [parse_int(word) for word in split_words(args[0], " ")]
    return [parse_int(arg) for arg in args]