import itertools
import math
from collections import Counter
from functools import lru_cache

from fivedice.config import FIVE_OF_A_KIND_SCORE, KEEP_ACTIONS, NUM_DICE, NUM_FACES
from fivedice.game.categories import Category, evaluate_hand


@lru_cache(maxsize=None)
def values_for(sorted_hand):
    """CategoryValues of a sorted hand tuple; only 252 distinct hands exist."""
    return evaluate_hand(sorted_hand)


class ExpectimaxAgent:
    def __init__(self):
        self.name = "Expectimax (Math)"
        self.dist_cache = {}  # n dice -> [(sorted outcome, probability)]
        self._precompute_distributions()

    def _precompute_distributions(self):
        # Iterate unique sorted outcomes and weight by multinomial probability
        for n in range(1, NUM_DICE + 1):
            outcomes = []
            total_outcomes = NUM_FACES ** n

            for combo in itertools.combinations_with_replacement(range(1, NUM_FACES + 1), n):
                # n! / (c1! * c2! * ... * c6!)
                denom = 1
                for c in Counter(combo).values():
                    denom *= math.factorial(c)
                freq = math.factorial(n) // denom
                outcomes.append((combo, freq / total_outcomes))

            self.dist_cache[n] = outcomes

        self.dist_cache[0] = [((), 1.0)]

    def select_action(self, mask, engine=None):
        if engine is None:
            raise ValueError("ExpectimaxAgent needs the engine to read the dice.")

        dice_values = [int(v) for v in engine.hand]
        rolls_left = engine.rolls_left
        scorecard = engine.scorecard

        best_cat = self.pick_best_category(dice_values, scorecard)

        # 1. Always Score if no rolls left
        if rolls_left == 0:
            return ("score", best_cat)

        # 2. Compare Expected Value of Rolling vs Scoring Immediately
        best_action_type = "score"
        best_action_val = best_cat
        best_ev = self.score_heuristic(best_cat, dice_values, scorecard)

        for keep_mask in range(KEEP_ACTIONS):
            kept_dice = [dice_values[i] for i in range(NUM_DICE) if (keep_mask >> i) & 1]
            n_reroll = NUM_DICE - len(kept_dice)
            if n_reroll == 0:
                continue

            ev = self.calculate_keep_ev(kept_dice, n_reroll, rolls_left - 1, scorecard)

            if ev > best_ev:
                best_ev = ev
                best_action_type = "keep"
                best_action_val = keep_mask

        return (best_action_type, best_action_val)

    def calculate_keep_ev(self, kept_dice, n_reroll, rolls_left, scorecard):
        total_ev = 0.0

        for roll, prob in self.dist_cache[n_reroll]:
            final_hand = kept_dice + list(roll)

            best_cat = self.pick_best_category(final_hand, scorecard)
            score_val = self.score_heuristic(best_cat, final_hand, scorecard)

            if rolls_left > 0:
                # Heuristic lookahead instead of full recursion
                potential_bonus = 0
                max_count = max(Counter(final_hand).values())
                if max_count < NUM_DICE:
                    if max_count >= 3: potential_bonus += 15
                    if max_count >= 4: potential_bonus += 25
                if len(set(final_hand)) >= 4: potential_bonus += 10
                score_val += potential_bonus

            total_ev += prob * score_val

        return total_ev

    def pick_best_category(self, dice, scorecard):
        available = scorecard.open_categories()
        if not available:
            return None

        best_cat = available[0]
        best_val = -float('inf')
        for cat in available:
            val = self.score_heuristic(cat, dice, scorecard)
            if val > best_val:
                best_val = val
                best_cat = cat
        return best_cat

    def score_heuristic(self, cat, dice, scorecard):
        score = values_for(tuple(sorted(dice)))[cat]
        weight = 0

        # Upper Bonus Strategy: three of the face is par
        if cat.is_upper:
            par = cat.face * 3
            weight += (score - par) * 2.0

        if cat == Category.FIVE_OF_A_KIND:
            if score == FIVE_OF_A_KIND_SCORE: weight += 200
            else: weight -= 100  # Avoid zeroing it unless necessary

        return score + weight
