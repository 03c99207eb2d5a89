"""
Protocol-oriented polymorphism.

Capability interfaces are structural `Protocol` classes: a type satisfies one
by providing the members, whatever its ancestry. Explicitly listing a protocol
as a base is allowed and documents intent, but is never required.
"""

import weakref
from collections.abc import Sequence
from enum import Enum
from typing import Protocol, runtime_checkable

from beartype import beartype


# =============================================================================
# DEFINING AND CONFORMING TO A PROTOCOL
# =============================================================================

class Food(Enum):
    FISH = "fish"
    SANDWICH = "sandwich"


@runtime_checkable
class Mammal(Protocol):
    def eat(self) -> Food: ...


class Orka:
    def eat(self) -> Food:
        return Food.FISH


class Human:
    def eat(self) -> Food:
        return Food.SANDWICH


@runtime_checkable
class Sandwich(Protocol):
    diameter: int


# Marker protocols; protocols can inherit several others.
@runtime_checkable
class Vertebrate(Protocol): ...


@runtime_checkable
class Flyable(Protocol): ...


@runtime_checkable
class CanSwim(Protocol): ...


@runtime_checkable
class Bird(Flyable, Vertebrate, Protocol): ...


class Fish(Vertebrate, CanSwim): ...


class Amphibian(Vertebrate, CanSwim): ...


# =============================================================================
# NOISE MAKERS: one interface, a heterogeneous collection
# =============================================================================

@runtime_checkable
class CanMakeNoise(Protocol):
    def make_noise(self) -> None: ...


class Elephant:
    NOISE = "Paon"

    def make_noise(self) -> None:
        print(self.NOISE)


class Pig:
    NOISE = "Bu-Hi, Bu-Hi"

    def make_noise(self) -> None:
        print(self.NOISE)


class Cow:
    NOISE = "Moo"

    def make_noise(self) -> None:
        print(self.NOISE)


@beartype
def make_all_noise(makers: Sequence[CanMakeNoise]) -> None:
    """Let every noise maker make its own noise, in order."""
    for maker in makers:
        maker.make_noise()


# =============================================================================
# MULTIPLE PROTOCOL RESTRICTION
# =============================================================================

@runtime_checkable
class Biped(Protocol):
    def name(self) -> str: ...

    def walk(self) -> None: ...


@runtime_checkable
class Hairy(Protocol):
    def hair_color(self) -> str: ...


@runtime_checkable
class BipedAndHairy(Biped, Hairy, Protocol):
    """Satisfied only by values that are both `Biped` and `Hairy`."""


class Dog(Hairy):
    def hair_color(self) -> str:
        return "White"


class Ostrich(Biped, Hairy):
    def walk(self) -> None:
        pass

    def name(self) -> str:
        return "Ostrich"

    def hair_color(self) -> str:
        return "Black"


@beartype
def describe(item: BipedAndHairy) -> str:
    return f"{item.name()} 's hair color is {item.hair_color()}"


# =============================================================================
# DELEGATION
# =============================================================================

@runtime_checkable
class TapDetectionDelegate(Protocol):
    def did_tap_circle(self, x: int, y: int) -> None: ...


class CircleView:
    """
    Forwards taps to a delegate.

    The delegate is held weakly so the view never keeps its owner alive, which
    limits delegates to objects that support weak references.
    """

    def __init__(self, delegate: TapDetectionDelegate | None = None):
        self._delegate_ref: weakref.ReferenceType[TapDetectionDelegate] | None = None
        self.delegate = delegate

    @property
    def delegate(self) -> TapDetectionDelegate | None:
        if self._delegate_ref is None:
            return None
        return self._delegate_ref()

    @delegate.setter
    def delegate(self, value: TapDetectionDelegate | None) -> None:
        self._delegate_ref = weakref.ref(value) if value is not None else None

    def tap(self, x: int, y: int) -> None:
        delegate = self.delegate
        if delegate is not None:
            delegate.did_tap_circle(x, y)


# =============================================================================
# OPTIONAL PROTOCOL MEMBERS
# =============================================================================

@runtime_checkable
class Purchasable(Protocol):
    """
    Marker for items that may carry `discount: float` and `purchase()`.

    Neither member is required; callers look them up and skip what is missing.
    """


@beartype
def checkout_price(item: Purchasable, price: float) -> float:
    """Apply the item's discount (if any) and purchase it (if it can be)."""
    discount = getattr(item, "discount", None)
    if discount is not None:
        price = price * (1 - discount)

    purchase = getattr(item, "purchase", None)
    if callable(purchase):
        purchase()

    return price
