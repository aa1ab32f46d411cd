import random

from fivedice.config import KEEP_ACTIONS
from fivedice.game.categories import ALL


class RandomAgent:
    def __init__(self, rng: random.Random = None):
        self.name = "Random (Baseline)"
        self.rng = rng or random.Random()

    def select_action(self, mask, engine=None):
        legal_actions = [('keep', i) for i in range(KEEP_ACTIONS) if mask[i]]
        legal_actions += [('score', cat) for i, cat in enumerate(ALL) if mask[KEEP_ACTIONS + i]]
        return self.rng.choice(legal_actions)


class GreedyAgent:
    def __init__(self):
        self.name = "Greedy (Naive)"

    def select_action(self, mask, engine):
        """
        Greedy Strategy: never re-roll, take the highest-value open category.
        Ties go to the lowest category.
        """
        best_cat = None
        best_score = -1

        for option in engine.open_options():
            if option.value > best_score:
                best_score = option.value
                best_cat = option.category

        return ('score', best_cat)
