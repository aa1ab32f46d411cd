import random

import pytest

from fivedice.ai.baselines import GreedyAgent, RandomAgent
from fivedice.ai.expectimax import ExpectimaxAgent
from fivedice.ai.rule_based import RuleBasedAgent, mask_for
from fivedice.game.categories import Category
from fivedice.game.engine import GameEngine
from fivedice.trainer.evaluator import Evaluator, play_game


def engine_with(scripted, *values):
    return GameEngine(scripted(*values))


def act(agent, engine):
    return agent.select_action(engine.get_mask(), engine)


def test_greedy_takes_highest_value(scripted):
    engine = engine_with(scripted, 5, 5, 5, 2, 2)
    assert act(GreedyAgent(), engine) == ('score', Category.FULL_HOUSE)


def test_greedy_skips_filled_categories(scripted):
    engine = engine_with(scripted, 5, 5, 5, 2, 2, 5, 5, 5, 2, 2)
    engine.apply_action('score', Category.FULL_HOUSE)
    assert act(GreedyAgent(), engine) == ('score', Category.THREE_OF_A_KIND)


def test_random_agent_only_picks_legal_actions():
    engine = GameEngine()
    agent = RandomAgent(random.Random(0))
    engine.apply_action('keep', 0)
    engine.apply_action('keep', 0)
    engine.apply_action('score', Category.CHANCE)
    for _ in range(2):
        engine.apply_action('keep', 0)

    for _ in range(50):
        action_type, value = act(agent, engine)
        assert action_type == 'score'
        assert value != Category.CHANCE


def test_mask_for_picks_first_matching_dice():
    assert mask_for([3, 1, 3, 3, 2], [3, 3]) == 0b00101


@pytest.mark.parametrize("values, expected", [
    ((3, 3, 3, 1, 2), ('keep', 0b00111)),
    ((1, 2, 3, 4, 6), ('keep', 0b01111)),
    ((2, 3, 4, 5, 6), ('score', Category.LARGE_STRAIGHT)),
    ((4, 4, 4, 4, 4), ('score', Category.FIVE_OF_A_KIND)),
    ((1, 5, 2, 6, 2), ('keep', 0b01010)),
])
def test_rule_based_keeps(scripted, values, expected):
    assert act(RuleBasedAgent(), engine_with(scripted, *values)) == expected


def test_rule_based_scores_when_out_of_rolls(scripted):
    engine = engine_with(scripted, 1, 1, 1, 1, 1, 6, 6, 6, 6, 2, 3, 1)
    engine.apply_action('score', Category.FIVE_OF_A_KIND)
    engine.apply_action('keep', 0b01111)
    engine.apply_action('keep', 0b01111)
    assert engine.rolls_left == 0
    assert act(RuleBasedAgent(), engine) == ('score', Category.SIXES)


def test_expectimax_distributions_are_normalized():
    agent = ExpectimaxAgent()
    for n, dist in agent.dist_cache.items():
        assert sum(p for _, p in dist) == pytest.approx(1.0)


def test_expectimax_banks_five_of_a_kind(scripted):
    engine = engine_with(scripted, 6, 6, 6, 6, 6)
    assert act(ExpectimaxAgent(), engine) == ('score', Category.FIVE_OF_A_KIND)


def test_expectimax_needs_engine():
    with pytest.raises(ValueError):
        ExpectimaxAgent().select_action(None)


@pytest.mark.parametrize("agent_cls", [RandomAgent, GreedyAgent, RuleBasedAgent])
def test_agents_finish_games(agent_cls):
    engine = play_game(agent_cls(), seed=3)
    assert engine.game_over
    assert engine.scorecard.is_done()
    assert engine.scorecard.score().total >= 0


def test_evaluator_is_reproducible_with_seed():
    evaluator = Evaluator(seed=10)
    first = evaluator.evaluate(GreedyAgent(), num_games=3)
    second = evaluator.evaluate(GreedyAgent(), num_games=3)
    assert first == second
    assert first > 0


def test_evaluator_seeds():
    assert Evaluator(seed=5).game_seeds(3) == [5, 6, 7]
    assert Evaluator().game_seeds(2) == [None, None]


def test_seeded_game_reseeds_random_agent():
    first = play_game(RandomAgent(), seed=8)
    second = play_game(RandomAgent(random.Random(123)), seed=8)
    assert first.scorecard.entries == second.scorecard.entries
