from typing import List, Optional

import numpy as np

from fivedice.game.dice import face_source
from fivedice.game.engine import GameEngine

MAX_STEPS = 1000


class InvalidAgentAction(RuntimeError):
    """An agent picked an action the engine rejected."""


def play_game(agent, seed: Optional[int] = None) -> GameEngine:
    """Plays one full game with the agent and returns the finished engine."""
    engine = GameEngine(face_source(seed))

    # A seed fixes the agent's own choices as well as the dice
    if seed is not None and hasattr(agent, "rng"):
        agent.rng.seed(seed)

    # Limit steps just in case (though engine handles it)
    steps = 0
    while not engine.game_over and steps < MAX_STEPS:
        mask = engine.get_mask()

        action_type, action_val = agent.select_action(mask, engine)
        _, valid, _ = engine.apply_action(action_type, action_val)

        if not valid:
            # With masking this only happens on an agent bug
            raise InvalidAgentAction(
                f"{agent.name} chose invalid action {action_type} {action_val} "
                f"on turn {engine.turn_number}"
            )
        steps += 1

    return engine


class Evaluator:
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed

    def game_seeds(self, num_games: int) -> List[Optional[int]]:
        if self.seed is None:
            return [None] * num_games
        return [self.seed + i for i in range(num_games)]

    def scores(self, agent, num_games=1) -> np.ndarray:
        return np.array(
            [play_game(agent, seed).scorecard.score().total for seed in self.game_seeds(num_games)]
        )

    def evaluate(self, agent, num_games=1) -> float:
        """
        Runs num_games for the agent and returns the average score.
        """
        return float(np.mean(self.scores(agent, num_games)))
