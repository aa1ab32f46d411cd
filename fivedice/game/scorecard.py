from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple

from fivedice.config import UPPER_BONUS, UPPER_BONUS_THRESHOLD
from fivedice.game.categories import ALL, CATEGORY_COUNT, Category


class AlreadyRecordedError(ValueError):
    """Raised when a category that already holds a score is recorded again."""

    def __init__(self, category: Category):
        super().__init__(f"Category {category.name} already filled.")
        self.category = category


class ValuedCategory(NamedTuple):
    category: Category
    value: int

    def __str__(self):
        return f"{self.value:2} for {self.category.label}"


@dataclass(frozen=True)
class Score:
    upper: int
    lower: int
    bonus: int

    @property
    def total(self) -> int:
        return self.upper + self.lower + self.bonus

    def __str__(self):
        return (
            f"Upper: {self.upper:3} Bonus: {self.bonus:2} "
            f"Lower: {self.lower:3} Total: {self.total:3}"
        )


class ScoreCard:
    """
    A player's append-only ledger of (category, value) entries, in play order.
    Each category can be recorded once; the card is done after 13 entries.
    """

    def __init__(self):
        self._entries: List[ValuedCategory] = []
        self._index: Dict[Category, int] = {}  # Category -> recorded value

    def __len__(self):
        return len(self._entries)

    @property
    def entries(self) -> Tuple[ValuedCategory, ...]:
        return tuple(self._entries)

    def has_category(self, category: Category) -> bool:
        return category in self._index

    def get_score(self, category: Category) -> Optional[int]:
        return self._index.get(category)

    def open_categories(self) -> List[Category]:
        return [c for c in ALL if c not in self._index]

    def record(self, category: Category, value: int):
        """Appends an entry. Raises AlreadyRecordedError if the category is filled."""
        category = Category(category)
        if category in self._index:
            raise AlreadyRecordedError(category)

        self._entries.append(ValuedCategory(category, value))
        self._index[category] = value

    def score(self) -> Score:
        upper = 0
        lower = 0
        for category, value in self._entries:
            if category.is_upper:
                upper += value
            else:
                lower += value

        bonus = UPPER_BONUS if upper >= UPPER_BONUS_THRESHOLD else 0
        return Score(upper=upper, lower=lower, bonus=bonus)

    def is_done(self) -> bool:
        return len(self._entries) == CATEGORY_COUNT
