from fivedice.config import FIVE_OF_A_KIND_SCORE, FULL_HOUSE_SCORE, LARGE_STRAIGHT_SCORE
from fivedice.game.categories import Category
from fivedice.game.tally import SMALL_STRAIGHTS


def mask_for(dice_values, wanted):
    """Keep mask of the first die showing each wanted face."""
    keep_mask = 0
    remaining = list(wanted)
    for i, d in enumerate(dice_values):
        if d in remaining:
            remaining.remove(d)
            keep_mask |= (1 << i)
    return keep_mask


class RuleBasedAgent:
    def __init__(self):
        self.name = "Rule-Based (Expert)"

    def select_action(self, mask, engine):
        """
        Decision Logic:
        1. Keep 3+ of a kind.
        2. Keep a 4-run when hunting straights.
        3. Otherwise keep 4s, 5s, 6s.
        Scoring goes through a priority list with acceptance thresholds.
        """
        dice_values = list(engine.hand)
        tally = engine.tally()
        scorecard = engine.scorecard

        # 1. Action: Keeping Dice (Roll 1 & 2)
        if engine.rolls_left > 0:
            if tally.has_n_of_a_kind(5):
                return 'score', self.pick_category(engine)

            # Rule 1: Keep 3+ of a kind
            for face in sorted(tally.present_faces(), reverse=True):
                if tally[face] >= 3:
                    return 'keep', mask_for(dice_values, [face] * tally[face])

            # Rule 2: Keep 4-run if a straight is still open
            straights_open = not (scorecard.has_category(Category.SMALL_STRAIGHT)
                                  and scorecard.has_category(Category.LARGE_STRAIGHT))
            if straights_open:
                present = tally.present_faces()
                for run in SMALL_STRAIGHTS:
                    if run <= present:
                        if tally.has_large_straight():
                            return 'score', self.pick_category(engine)
                        return 'keep', mask_for(dice_values, sorted(run))

            # Fallback: Keep 4s, 5s, 6s (High Value)
            keep_mask = 0
            for i, d in enumerate(dice_values):
                if d >= 4:
                    keep_mask |= (1 << i)

            return 'keep', keep_mask

        # 2. Action: Scoring (Roll 3)
        return 'score', self.pick_category(engine)

    def pick_category(self, engine):
        values = engine.current_values()
        scorecard = engine.scorecard

        priorities = [
            Category.FIVE_OF_A_KIND,
            Category.LARGE_STRAIGHT,
            Category.SIXES, Category.FIVES, Category.FOURS,
            Category.FULL_HOUSE,
            Category.SMALL_STRAIGHT,
            Category.THREES, Category.TWOS, Category.ONES,
        ]

        for cat in priorities:
            if scorecard.has_category(cat):
                continue
            score = values[cat]

            # Acceptance Thresholds
            if cat == Category.FIVE_OF_A_KIND and score == FIVE_OF_A_KIND_SCORE: return cat
            if cat == Category.LARGE_STRAIGHT and score == LARGE_STRAIGHT_SCORE: return cat
            if cat == Category.FULL_HOUSE and score == FULL_HOUSE_SCORE: return cat
            if cat == Category.SMALL_STRAIGHT and score > 0: return cat
            if cat.is_upper and score >= cat.face * 3: return cat

        # If nothing good, dump best points or 0
        best_cat = None
        best_score = -1
        for option in engine.open_options():
            if option.value > best_score:
                best_score = option.value
                best_cat = option.category

        return best_cat
