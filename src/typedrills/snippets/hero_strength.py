# expect: error
from typedrills.characters import Hero

hero = Hero(health=100, strength=1000, aim=100)
# A hero's strength is fixed once it is created.
hero.strength = 200
