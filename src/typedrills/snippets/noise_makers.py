# expect: ok
from typedrills.protocols import CanMakeNoise, Cow, Elephant, Pig, make_all_noise

makers: list[CanMakeNoise] = [Elephant(), Pig(), Cow()]
make_all_noise(makers)
