import pytest

from typedrills.characters import (
    HENCHMAN_STRENGTH,
    Character,
    Henchman,
    Hero,
    default_strength,
)


def test_henchman_gets_default_strength():
    stormtrooper = Henchman(health=100, aim=-100)
    assert stormtrooper.strength == HENCHMAN_STRENGTH == 200


def test_hero_keeps_own_strength():
    hero = Hero(health=100, strength=1000, aim=100)
    assert hero.strength == 1000


def test_default_strength_is_only_for_henchmen():
    with pytest.raises(NotImplementedError):
        default_strength(Hero(health=100, strength=1000, aim=100))


def test_health_and_aim_are_mutable():
    hero = Hero(health=100, strength=1000, aim=100)
    hero.health = 200
    hero.aim = 50
    assert (hero.health, hero.aim) == (200, 50)


def test_henchman_strength_cannot_be_assigned():
    stormtrooper = Henchman(health=100, aim=-100)
    with pytest.raises(AttributeError):
        stormtrooper.strength = 500


def test_hero_strength_cannot_be_assigned():
    hero = Hero(health=100, strength=1000, aim=100)
    with pytest.raises(AttributeError):
        hero.strength = 200
    assert hero.strength == 1000


def test_hero_equality_includes_strength():
    assert Hero(health=1, strength=5, aim=1) == Hero(health=1, strength=5, aim=1)
    assert Hero(health=1, strength=5, aim=1) != Hero(health=1, strength=6, aim=1)


def test_both_are_characters():
    assert isinstance(Henchman(health=1, aim=1), Character)
    assert isinstance(Hero(health=1, strength=1, aim=1), Character)
