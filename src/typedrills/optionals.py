"""
Optional binding exercises.

A `Person | None` either carries a name or carries nothing. Both greeters
below return the same text for the same input; they only differ in how the
absent case is taken apart.
"""

from dataclasses import dataclass

from beartype import beartype

INVALID_PERSON = "This is not a valid person object."


@beartype
@dataclass(frozen=True)
class Person:
    name: str


@beartype
def my_name_is(person: Person | None) -> str:
    """Introduce the person using conditional unwrapping."""
    if person is not None:
        return f"My name is {person.name}."
    return INVALID_PERSON


@beartype
def my_name_is_matched(person: Person | None) -> str:
    """Introduce the person using an exhaustive match on present/absent."""
    match person:
        case None:
            return INVALID_PERSON
        case Person(name=name):
            return f"My name is {name}."
