"""Validation and parsing of the command-line numbers."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ErrorKind(IntEnum):
    """The kinds of input error, with the codes the program uses for them."""

    WRONG_ARGS = 1
    INVALID_DIGIT = 2
    DUPLICATES = 3
    OVERFLOW = 4
    UNKNOWN_ERROR = 5

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.WRONG_ARGS: "Error. Invalid number of arguments.",
    ErrorKind.INVALID_DIGIT: "Error. One or more arguments are not valid numbers.",
    ErrorKind.DUPLICATES: "Error. There are duplicate numbers.",
    ErrorKind.OVERFLOW: "Error. A number is out of the valid range for an int.",
    ErrorKind.UNKNOWN_ERROR: "Error. An unknown error occurred.",
}


class InputError(ValueError):
    """Raised when the arguments cannot be turned into a stack."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


def _is_alpha(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_space(ch: str) -> bool:
    return ch == " " or "\t" <= ch <= "\r"


def _char_at(text: str, index: int) -> str:
    """Character at ``index``, or an empty string past either end."""
    return text[index] if 0 <= index < len(text) else ""


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _leading_number(text: str) -> int:
    """Read optional whitespace, an optional sign and a run of digits."""
    pos = 0
    while pos < len(text) and _is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and _is_digit(text[pos]):
        result = result * 10 + int(text[pos])
        pos += 1
    return sign * result


def atoi(text: str) -> int:
    """Parse the leading integer of ``text`` as a 32-bit signed int."""
    return _wrap(_leading_number(text), 32)


def long_atoi(text: str) -> int:
    """Parse the leading integer of ``text`` as a 64-bit signed long."""
    return _wrap(_leading_number(text), 64)


def join_arguments(args: Sequence[str]) -> str:
    """Join the arguments into one string, separated by single spaces."""
    if not args:
        raise InputError(ErrorKind.WRONG_ARGS)
    return " ".join(args)


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def check_digits(text: str) -> bool:
    """Return True if ``text`` is not a valid list of numbers."""
    if _is_alpha(_char_at(text, 0)):
        return True
    start = 0
    if _char_at(text, 0) in ("+", "-"):
        if not _is_digit(_char_at(text, 1)):
            return True
        start = 1
    for pos in range(start, len(text)):
        ch = text[pos]
        is_sign = ch in "+-"
        if is_sign and not (
            _is_digit(_char_at(text, pos + 1)) and _is_space(_char_at(text, pos - 1))
        ):
            return True
        if not _is_digit(ch) and not _is_space(ch) and not is_sign:
            return True
    return False


def has_duplicates(words: Sequence[str]) -> bool:
    """Return True if two words parse to the same number."""
    values = [long_atoi(word) for word in words]
    return len(set(values)) != len(values)


def exceeds_int(words: Sequence[str]) -> bool:
    """Return True if any word parses outside the 32-bit int range."""
    return any(not INT_MIN <= long_atoi(word) <= INT_MAX for word in words)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate the arguments and return the numbers for stack a, top first."""
    text = join_arguments(args)
    words = split_words(text)
    if check_digits(text):
        raise InputError(ErrorKind.INVALID_DIGIT)
    if has_duplicates(words):
        raise InputError(ErrorKind.DUPLICATES)
    if exceeds_int(words):
        raise InputError(ErrorKind.OVERFLOW)
    if not words:
        raise InputError(ErrorKind.UNKNOWN_ERROR)
    return [atoi(word) for word in words]