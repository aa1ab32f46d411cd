import random
from enum import IntEnum
from typing import Callable, Iterable, List, Optional, Set, Tuple

from fivedice.config import NUM_DICE, NUM_FACES


class Face(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6

    @property
    def glyph(self) -> str:
        # U+2680 is the one-pip die face
        return chr(0x2680 + self.value - 1)

    def __str__(self):
        return self.glyph


FACES = tuple(Face)

Hand = Tuple[Face, ...]
FaceSource = Callable[[], Face]


def make_hand(values: Iterable[int]) -> Hand:
    """Builds a Hand from five ints (or Faces). Raises ValueError otherwise."""
    hand = tuple(Face(v) for v in values)
    if len(hand) != NUM_DICE:
        raise ValueError(f"A hand has {NUM_DICE} dice, got {len(hand)}.")
    return hand


def random_face() -> Face:
    return Face(random.randint(1, NUM_FACES))


def face_source(seed: Optional[int] = None) -> FaceSource:
    """Returns a face generator with its own RNG, for reproducible games."""
    rng = random.Random(seed)

    def roll_one() -> Face:
        return Face(rng.randint(1, NUM_FACES))

    return roll_one


class Dice:
    def __init__(self, source: Optional[FaceSource] = None):
        self.count = NUM_DICE
        self.source = source or random_face
        self.values: List[Face] = []
        self.reset()

    def reset(self):
        """Rolls every die. A turn always starts with a full roll."""
        self.values = [self.source() for _ in range(self.count)]

    def roll(self, keep_indices: Set[int] = None):
        """
        Re-rolls the dice.
        :param keep_indices: A set of indices (0-4) to keep. All others are re-rolled.
        """
        if keep_indices is None:
            keep_indices = set()

        for i in range(self.count):
            if i not in keep_indices:
                self.values[i] = self.source()

    def hand(self) -> Hand:
        return tuple(self.values)

    def sort(self):
        """Orders the dice low to high, so die numbers follow the displayed order."""
        self.values.sort()

    def __str__(self):
        return " ".join(str(v) for v in self.values)
