"""Strict unsigned integer parsing for the age field."""

from __future__ import annotations

import re
from enum import StrEnum

USIZE_MAX = 2 ** 64 - 1

# ASCII only: `int()` alone would also accept whitespace, underscores and non-ASCII digits.
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class IntErrorKind(StrEnum):
    """Why an unsigned integer could not be parsed."""

    empty = "empty"
    invalid_digit = "invalid_digit"
    pos_overflow = "pos_overflow"


_MESSAGES: dict[IntErrorKind, str] = {
    IntErrorKind.empty: "cannot parse integer from empty string",
    IntErrorKind.invalid_digit: "invalid digit found in string",
    IntErrorKind.pos_overflow: "number too large to fit in target type",
}


class ParseIntError(ValueError):
    """Raised when text is not a valid unsigned integer."""

    def __init__(self, kind: IntErrorKind, text: str) -> None:
        self.kind = kind
        self.text = text
        super().__init__(_MESSAGES[kind])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseIntError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"ParseIntError(kind={self.kind.value!r}, text={self.text!r})"


def parse_unsigned(text: str, *, max_value: int = USIZE_MAX) -> int:
    """Parse `text` as a non-negative integer no larger than `max_value`.

    Accepts an optional leading `+` followed by ASCII digits; leading zeros are allowed.

    Raises:
        ParseIntError: If the text is empty, contains any other character, or overflows.
    """

    if not text:
        raise ParseIntError(IntErrorKind.empty, text)
    if not _UNSIGNED_RE.fullmatch(text):
        raise ParseIntError(IntErrorKind.invalid_digit, text)

    value = int(text)
    if value > max_value:
        raise ParseIntError(IntErrorKind.pos_overflow, text)
    return value
