from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from beartype import beartype


@runtime_checkable
class Vehicle(Protocol):
    max_speed: int
    number_of_wheels: int
    number_of_doors: int
    model: str


@beartype
@dataclass
class Car:
    max_speed: int
    number_of_wheels: int
    number_of_doors: int
    model: str


@beartype
@dataclass
class Truck:
    max_speed: int
    number_of_wheels: int
    number_of_doors: int
    model: str


@beartype
@dataclass
class Motorcycle:
    max_speed: int
    number_of_wheels: int
    number_of_doors: int
    model: str


@beartype
@dataclass
class Bus:
    max_speed: int
    number_of_wheels: int
    number_of_doors: int
    model: str


@beartype
def fastest(vehicles: list[Vehicle]) -> Vehicle | None:
    """Return the vehicle with the highest max speed, or None for an empty fleet."""
    return max(vehicles, key=lambda v: v.max_speed, default=None)
