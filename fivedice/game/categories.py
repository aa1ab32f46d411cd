from enum import IntEnum
from typing import Iterable, Iterator, Optional, Tuple

from fivedice.config import (
    FIVE_OF_A_KIND_SCORE,
    FULL_HOUSE_SCORE,
    LARGE_STRAIGHT_SCORE,
    SMALL_STRAIGHT_SCORE,
)
from fivedice.game.dice import FACES, Face
from fivedice.game.tally import FaceTally


class Category(IntEnum):
    # Upper section: the value is the face it counts
    ONES = 1
    TWOS = 2
    THREES = 3
    FOURS = 4
    FIVES = 5
    SIXES = 6
    # Lower section
    THREE_OF_A_KIND = 7
    FOUR_OF_A_KIND = 8
    FULL_HOUSE = 9
    SMALL_STRAIGHT = 10
    LARGE_STRAIGHT = 11
    FIVE_OF_A_KIND = 12
    CHANCE = 13

    @classmethod
    def upper(cls, face: int) -> "Category":
        return cls(Face(face).value)

    @property
    def is_upper(self) -> bool:
        return self <= Category.SIXES

    @property
    def face(self) -> Optional[Face]:
        return Face(self.value) if self.is_upper else None

    @property
    def label(self) -> str:
        if self.is_upper:
            return f"{self.face.glyph} s"
        return LOWER_LABELS[self]

    def __str__(self):
        return self.label


LOWER_LABELS = {
    Category.THREE_OF_A_KIND: "3 of a kind",
    Category.FOUR_OF_A_KIND: "4 of a kind",
    Category.FULL_HOUSE: "full house",
    Category.SMALL_STRAIGHT: "small straight",
    Category.LARGE_STRAIGHT: "large straight",
    Category.FIVE_OF_A_KIND: "5 of a kind",
    Category.CHANCE: "chance",
}

ALL = tuple(Category)
UPPER = tuple(c for c in Category if c.is_upper)
LOWER = tuple(c for c in Category if not c.is_upper)

CATEGORY_COUNT = 13


class CategoryValues:
    """
    The score a single hand would earn under every category.
    Values live in a fixed 13-slot tuple indexed by category ordinal.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int]):
        values = tuple(values)
        if len(values) != CATEGORY_COUNT:
            raise ValueError(f"Expected {CATEGORY_COUNT} values, got {len(values)}.")
        self._values = values

    def __getitem__(self, category: Category) -> int:
        return self._values[Category(category) - 1]

    def __iter__(self) -> Iterator[Category]:
        return iter(ALL)

    def __len__(self):
        return CATEGORY_COUNT

    def __eq__(self, other):
        if not isinstance(other, CategoryValues):
            return NotImplemented
        return self._values == other._values

    def __repr__(self):
        pairs = ", ".join(f"{c.name}={v}" for c, v in self.items())
        return f"CategoryValues({pairs})"

    def items(self) -> Iterator[Tuple[Category, int]]:
        """All 13 (category, value) pairs in category order, unfiltered."""
        return zip(ALL, self._values)

    def as_dict(self):
        return dict(self.items())


def evaluate(tally: FaceTally) -> CategoryValues:
    """Computes every category's value for one tally. Never fails."""
    total = tally.sum()
    upper = tally.weighted_by_value()

    lower = {
        Category.THREE_OF_A_KIND: total if tally.has_n_of_a_kind(3) else 0,
        Category.FOUR_OF_A_KIND: total if tally.has_n_of_a_kind(4) else 0,
        Category.FULL_HOUSE: FULL_HOUSE_SCORE if tally.has_full_house() else 0,
        Category.SMALL_STRAIGHT: SMALL_STRAIGHT_SCORE if tally.has_small_straight() else 0,
        Category.LARGE_STRAIGHT: LARGE_STRAIGHT_SCORE if tally.has_large_straight() else 0,
        Category.FIVE_OF_A_KIND: FIVE_OF_A_KIND_SCORE if tally.has_n_of_a_kind(5) else 0,
        Category.CHANCE: total,
    }

    return CategoryValues([upper[face] for face in FACES] + [lower[c] for c in LOWER])


def evaluate_hand(hand: Iterable[int]) -> CategoryValues:
    return evaluate(FaceTally.build(hand))
