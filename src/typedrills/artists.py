"""
Artist with a partial equality relation.

Two artists are equal when they share a style. Name and year of birth are
ignored on purpose: this is partial equality, not structural equality.
"""

from dataclasses import dataclass
from enum import Enum

from beartype import beartype


class Style(Enum):
    IMPRESSIONISM = "impressionism"
    SURREALISM = "surrealism"
    CUBISM = "cubism"
    POP_ART = "popArt"


@beartype
@dataclass(frozen=True, eq=False)
class Artist:
    name: str
    style: Style
    year_born: int

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Artist) and equals(self, other)

    def __hash__(self) -> int:
        # Must agree with __eq__, so only the style participates.
        return hash(self.style)


@beartype
def equals(a: Artist, b: Artist) -> bool:
    """True iff both artists have the same style (partial equality)."""
    return a.style == b.style


MONET = Artist(name="monet", style=Style.IMPRESSIONISM, year_born=1840)
DALI = Artist(name="Salvador Dali", style=Style.SURREALISM, year_born=1904)
ANDY = Artist(name="Andy Warhol", style=Style.POP_ART, year_born=1928)
