# expect: error
from typedrills.optionals import Person


def introduce(person: Person | None) -> str:
    # No check for None before reaching into the optional.
    return f"My name is {person.name}."
