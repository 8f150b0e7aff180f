"""Tests for the strict Person Pydantic schema."""

from __future__ import annotations

import pytest

from src.person.schema import Person, person_from_obj


def test_person_equality() -> None:
    assert Person(name="John", age=32) == Person(name="John", age=32)
    assert Person(name="John", age=32) != Person(name="John", age=33)


def test_person_requires_name() -> None:
    with pytest.raises(ValueError):
        Person(name="", age=1)


def test_person_name_is_ascii_letters() -> None:
    with pytest.raises(ValueError):
        Person(name="John Smith", age=1)
    with pytest.raises(ValueError):
        Person(name="José", age=1)


def test_person_age_bounds() -> None:
    with pytest.raises(ValueError):
        Person(name="John", age=-1)
    with pytest.raises(ValueError):
        Person(name="John", age=2 ** 64)
    assert Person(name="John", age=2 ** 64 - 1).age == 2 ** 64 - 1


def test_person_from_obj() -> None:
    assert person_from_obj({"name": "Mark", "age": 20}) == Person(name="Mark", age=20)


def test_person_from_obj_forbids_extra_fields() -> None:
    with pytest.raises(ValueError):
        person_from_obj({"name": "Mark", "age": 20, "email": "mark@example.com"})
