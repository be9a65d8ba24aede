"""Validated construction of domain values with Result.

Smart constructors return Result[..., str] with a human-readable message
instead of raising. Composite values are assembled with map2, so when several
fields are invalid the first one checked (the left operand) is reported.

Example:
    >>> mk_person("Ada", 36)
    Ok(Person(name=Name(value='Ada'), age=Age(value=36)))
    >>> mk_person("", -1)
    Err('Name is empty.')
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from .result import Err, Ok, Result, map2

NAME_EMPTY = "Name is empty."
AGE_OUT_OF_RANGE = "Age is out of range."


class Name(BaseModel):
    """Non-blank person name."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    value: Annotated[str, Field(min_length=1)]


class Age(BaseModel):
    """Non-negative age in years."""

    model_config = ConfigDict(frozen=True)

    value: Annotated[int, Field(ge=0)]


class Person(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Name
    age: Age


def mk_name(name: str | None) -> Result[Name, str]:
    if name is None or not name.strip():
        return Err(NAME_EMPTY)
    return Ok(Name(value=name))


def mk_age(age: int) -> Result[Age, str]:
    if age < 0:
        return Err(AGE_OUT_OF_RANGE)
    return Ok(Age(value=age))


def mk_person(name: str | None, age: int) -> Result[Person, str]:
    """Validate both fields; name failure takes precedence over age failure."""
    return map2(mk_name(name), mk_age(age), lambda n, a: Person(name=n, age=a))
