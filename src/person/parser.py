"""Character-level `"name,age"` parser.

The input is scanned left to right through a small state machine:
    - the name is one or more ASCII letters,
    - the first non-letter after the name is consumed as the field separator,
    - everything after the separator is the age, which must not contain another comma.

The age token is handed to the strict unsigned parser; its failure is wrapped, never replaced by a
default value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from src.person.numbers import ParseIntError, parse_unsigned
from src.person.schema import Person

logger = logging.getLogger(__name__)


class ParsePersonErrorKind(StrEnum):
    """Reasons a string cannot be parsed into a Person."""

    empty = "empty"
    bad_len = "bad_len"
    no_name = "no_name"
    parse_int = "parse_int"


_MESSAGES: dict[ParsePersonErrorKind, str] = {
    ParsePersonErrorKind.empty: "empty input string",
    ParsePersonErrorKind.bad_len: "incorrect number of fields",
    ParsePersonErrorKind.no_name: "empty name field",
    ParsePersonErrorKind.parse_int: "invalid age",
}


class ParsePersonError(ValueError):
    """Raised when a string cannot be parsed into a Person.

    For `kind=parse_int` the underlying `ParseIntError` is available as `parse_int_error`
    (and as `__cause__` when raised by `parse_person`).
    """

    def __init__(
            self,
            kind: ParsePersonErrorKind,
            parse_int_error: ParseIntError | None = None,
    ) -> None:
        self.kind = kind
        self.parse_int_error = parse_int_error
        message = _MESSAGES[kind]
        if parse_int_error is not None:
            message = f"{message}: {parse_int_error}"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePersonError):
            return NotImplemented
        return self.kind == other.kind and self.parse_int_error == other.parse_int_error

    def __hash__(self) -> int:
        return hash((self.kind, self.parse_int_error))

    def __repr__(self) -> str:
        if self.parse_int_error is None:
            return f"ParsePersonError(kind={self.kind.value!r})"
        return f"ParsePersonError(kind={self.kind.value!r}, parse_int_error={self.parse_int_error!r})"


class _Step(StrEnum):
    init = "init"
    name = "name"
    pending_age = "pending_age"
    name_and_age = "name_and_age"


@dataclass(frozen=True)
class _ParsingState:
    step: _Step = _Step.init
    name: str = ""
    age: str = ""


def _is_name_char(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _advance(state: _ParsingState, char: str) -> _ParsingState:
    """Consume one character and return the next state."""

    if state.step == _Step.init:
        if _is_name_char(char):
            return _ParsingState(step=_Step.name, name=char)
        raise ParsePersonError(ParsePersonErrorKind.no_name)

    if state.step == _Step.name:
        if _is_name_char(char):
            return replace(state, name=state.name + char)
        # Any non-letter ends the name and is consumed as the separator.
        return replace(state, step=_Step.pending_age)

    if state.step == _Step.pending_age:
        return replace(state, step=_Step.name_and_age, age=char)

    if char == ",":
        raise ParsePersonError(ParsePersonErrorKind.bad_len)
    return replace(state, age=state.age + char)


def _finish(state: _ParsingState) -> Person:
    """Turn the state left after the last character into a Person."""

    if state.step == _Step.init:
        raise ParsePersonError(ParsePersonErrorKind.empty)
    if state.step == _Step.name:
        raise ParsePersonError(ParsePersonErrorKind.bad_len)

    # `pending_age` leaves an empty age, which the unsigned parser rejects.
    try:
        age = parse_unsigned(state.age)
    except ParseIntError as exc:
        raise ParsePersonError(ParsePersonErrorKind.parse_int, exc) from exc
    return Person(name=state.name, age=age)


def parse_person(text: str) -> Person:
    """Parse a `"name,age"` string into a validated Person.

    Raises:
        ParsePersonError: If the input is empty, malformed, or the age is not a valid unsigned
            integer.
    """

    state = _ParsingState()
    try:
        for char in text:
            state = _advance(state, char)
        return _finish(state)
    except ParsePersonError as exc:
        logger.debug("rejected input kind=%s", exc.kind)
        raise
