"""
Characters and a default implementation restricted to one conforming type.

`Character` requires a readable `strength`. `Hero` stores its own; `Henchman`
stores none and gets the default from `default_strength`, which is registered
for `Henchman` only.
"""

from dataclasses import dataclass
from functools import singledispatch
from typing import Protocol, runtime_checkable

from beartype import beartype

HENCHMAN_STRENGTH = 200


@runtime_checkable
class Character(Protocol):
    health: int
    aim: int

    @property
    def strength(self) -> int: ...


@singledispatch
def default_strength(character: object) -> int:
    raise NotImplementedError(
        f"No default strength for {type(character).__name__}"
    )


@beartype
@dataclass
class Henchman:
    health: int
    aim: int

    @property
    def strength(self) -> int:
        return default_strength(self)


@default_strength.register
def _(character: Henchman) -> int:
    return HENCHMAN_STRENGTH


@beartype
@dataclass(init=False)
class Hero:
    health: int
    aim: int
    _strength: int

    def __init__(self, health: int, strength: int, aim: int):
        self.health = health
        self._strength = strength
        self.aim = aim

    @property
    def strength(self) -> int:
        # Fixed at construction; only health and aim change.
        return self._strength
