from typing import List, Optional, Tuple

import numpy as np

from fivedice.config import INVALID_ACTION_PENALTY, KEEP_ACTIONS, NUM_DICE, ROLLS_PER_TURN
from fivedice.game.categories import ALL, Category, CategoryValues, evaluate
from fivedice.game.dice import Dice, FaceSource, Hand
from fivedice.game.scorecard import AlreadyRecordedError, ScoreCard, ValuedCategory
from fivedice.game.tally import FaceTally


class GameEngine:
    def __init__(self, source: Optional[FaceSource] = None):
        self.dice = Dice(source)
        self.scorecard = ScoreCard()
        self.rolls_left = ROLLS_PER_TURN - 1
        self.turn_number = 1
        self.game_over = False

        self.start_new_turn()

    def start_new_turn(self):
        if self.scorecard.is_done():
            self.game_over = True
            return

        self.turn_number = len(self.scorecard) + 1
        # The opening roll is part of the turn; what is left are re-rolls
        self.dice.reset()
        self.rolls_left = ROLLS_PER_TURN - 1

    @property
    def hand(self) -> Hand:
        return self.dice.hand()

    def tally(self) -> FaceTally:
        return FaceTally.build(self.hand)

    def current_values(self) -> CategoryValues:
        return evaluate(self.tally())

    def open_options(self) -> List[ValuedCategory]:
        """(category, value) for every category not yet recorded, in category order."""
        values = self.current_values()
        return [
            ValuedCategory(category, value)
            for category, value in values.items()
            if not self.scorecard.has_category(category)
        ]

    def apply_action(self, action_type: str, action_value: int) -> Tuple[float, bool, bool]:
        """
        Applies an action from a player or agent.
        :param action_type: 'keep' or 'score'
        :param action_value: Bitmask for 'keep' (0-31) or Category for 'score' (1-13)
        :return: (reward, valid, game_over)
        """
        if self.game_over:
            return 0, False, True

        if action_type == 'keep':
            if self.rolls_left <= 0:
                return INVALID_ACTION_PENALTY, False, self.game_over

            # 5 bits: 1 = Keep, 0 = Re-roll
            keep_indices = {i for i in range(NUM_DICE) if (action_value >> i) & 1}

            self.dice.roll(keep_indices)
            self.rolls_left -= 1
            return 0, True, False

        elif action_type == 'score':
            try:
                category = Category(action_value)
            except ValueError:
                return INVALID_ACTION_PENALTY, False, self.game_over

            points = self.current_values()[category]
            try:
                self.scorecard.record(category, points)
            except AlreadyRecordedError:
                return INVALID_ACTION_PENALTY, False, self.game_over

            self.start_new_turn()
            return points, True, self.game_over

        return 0, False, self.game_over

    def get_mask(self) -> np.ndarray:
        """
        Returns a mask of valid actions.
        Output Vector Size: 32 (Keep) + 13 (Score) = 45.
        1.0 = Valid, 0.0 = Invalid.
        """
        keep_mask = np.ones(KEEP_ACTIONS, dtype=np.float32)
        if self.rolls_left == 0 or self.game_over:
            keep_mask[:] = 0.0

        score_mask = np.zeros(len(ALL), dtype=np.float32)
        if not self.game_over:
            for i, cat in enumerate(ALL):
                if not self.scorecard.has_category(cat):
                    score_mask[i] = 1.0

        return np.concatenate([keep_mask, score_mask])
