# expect: ok
from typedrills.protocols import Ostrich, describe

# Ostrich is both Biped and Hairy, so describe() accepts it.
print(describe(Ostrich()))
