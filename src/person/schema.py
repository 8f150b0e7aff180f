"""Person record schema (Pydantic model).

This model is the contract between the string parser and its callers: a parsed record always
validates against it, and records built by hand are held to the same rules.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.person.numbers import USIZE_MAX


class Person(BaseModel):
    """A person with an ASCII-letter name and a non-negative age."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, pattern=r"^[A-Za-z]+$")
    age: int = Field(ge=0, le=USIZE_MAX)


def person_from_obj(obj: Any) -> Person:
    """Validate and parse a Person from an arbitrary decoded object."""

    return Person.model_validate(obj)
