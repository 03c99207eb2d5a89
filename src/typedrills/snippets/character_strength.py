# expect: error
from typedrills.characters import Character, Hero


def weaken(char: Character) -> None:
    # strength is read-only through the Character protocol.
    char.strength = 100


hero = Hero(health=100, strength=1000, aim=100)
hero.health = 200
weaken(hero)
