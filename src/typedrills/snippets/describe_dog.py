# expect: error
from typedrills.protocols import Dog, describe

# Dog is Hairy but not Biped.
print(describe(Dog()))
