from collections import Counter
from typing import Dict, FrozenSet, Iterable, Tuple

from fivedice.game.dice import FACES, Face

SMALL_STRAIGHTS = (
    frozenset({1, 2, 3, 4}),
    frozenset({2, 3, 4, 5}),
    frozenset({3, 4, 5, 6}),
)

LARGE_STRAIGHTS = (
    frozenset({1, 2, 3, 4, 5}),
    frozenset({2, 3, 4, 5, 6}),
)


class FaceTally:
    """
    Per-face occurrence counts of a hand.
    Counts are stored ONE..SIX; for a valid hand they sum to 5.
    """

    __slots__ = ("counts",)

    def __init__(self, counts: Tuple[int, int, int, int, int, int]):
        if len(counts) != len(FACES):
            raise ValueError(f"Expected {len(FACES)} counts, got {len(counts)}.")
        self.counts = tuple(counts)

    @classmethod
    def build(cls, hand: Iterable[int]) -> "FaceTally":
        counter = Counter(Face(v) for v in hand)
        return cls(tuple(counter[face] for face in FACES))

    def __getitem__(self, face: int) -> int:
        return self.counts[Face(face) - 1]

    def __eq__(self, other):
        if not isinstance(other, FaceTally):
            return NotImplemented
        return self.counts == other.counts

    def __hash__(self):
        return hash(self.counts)

    def __repr__(self):
        return f"FaceTally({self.counts})"

    def total_dice(self) -> int:
        return sum(self.counts)

    def sum(self) -> int:
        return sum(face * count for face, count in zip(FACES, self.counts))

    def max_count(self) -> int:
        return max(self.counts)

    def present_faces(self) -> FrozenSet[Face]:
        return frozenset(face for face, count in zip(FACES, self.counts) if count > 0)

    def has_n_of_a_kind(self, n: int) -> bool:
        # At least n: five of a kind also counts as three and four of a kind
        return any(count >= n for count in self.counts)

    def has_full_house(self) -> bool:
        # Exactly 3 + exactly 2, so five of a kind is not a full house
        return 3 in self.counts and 2 in self.counts

    def _has_straight(self, straights) -> bool:
        present = self.present_faces()
        return any(straight <= present for straight in straights)

    def has_small_straight(self) -> bool:
        return self._has_straight(SMALL_STRAIGHTS)

    def has_large_straight(self) -> bool:
        return self._has_straight(LARGE_STRAIGHTS)

    def weighted_by_value(self) -> Dict[Face, int]:
        """Each face's count times its value, i.e. the upper section scores."""
        return {face: face * count for face, count in zip(FACES, self.counts)}
