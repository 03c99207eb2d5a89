import pytest

from typedrills.vehicles import Bus, Car, Motorcycle, Truck, Vehicle, fastest


@pytest.fixture
def fleet():
    return [
        Car(max_speed=180, number_of_wheels=4, number_of_doors=4, model="Civic"),
        Truck(max_speed=120, number_of_wheels=18, number_of_doors=2, model="Actros"),
        Motorcycle(max_speed=200, number_of_wheels=2, number_of_doors=0, model="Ninja"),
        Bus(max_speed=100, number_of_wheels=6, number_of_doors=3, model="Citaro"),
    ]


def test_every_variant_is_a_vehicle(fleet):
    for vehicle in fleet:
        assert isinstance(vehicle, Vehicle)


def test_fastest(fleet):
    assert fastest(fleet).model == "Ninja"


def test_fastest_of_empty_fleet():
    assert fastest([]) is None


def test_vehicle_attributes_are_mutable(fleet):
    car = fleet[0]
    car.max_speed = 190
    assert car.max_speed == 190


def test_fastest_keeps_first_on_ties():
    car = Car(max_speed=150, number_of_wheels=4, number_of_doors=2, model="First")
    bus = Bus(max_speed=150, number_of_wheels=6, number_of_doors=3, model="Second")
    assert fastest([car, bus]) is car
