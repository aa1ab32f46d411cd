import argparse

from fivedice.ai.baselines import GreedyAgent, RandomAgent
from fivedice.ai.expectimax import ExpectimaxAgent
from fivedice.ai.rule_based import RuleBasedAgent
from fivedice.config import NUM_DICE
from fivedice.game.dice import face_source
from fivedice.game.engine import GameEngine
from fivedice.ui.views import render_hand, render_options, render_scorecard, sorted_options

AGENTS = {
    "random": RandomAgent,
    "greedy": GreedyAgent,
    "rules": RuleBasedAgent,
    "expectimax": ExpectimaxAgent,
}

REROLL_PROMPT = "Select the dice that you want to roll again (e.g. 1 3 5, blank to stop): "
RECORD_PROMPT = "What combination do you want to record? "


def parse_reroll(text):
    """'1 3 5' -> keep mask of the dice NOT listed. Raises ValueError on bad input."""
    picked = set()
    for token in text.replace(",", " ").split():
        idx = int(token)
        if not 1 <= idx <= NUM_DICE:
            raise ValueError(f"Die number must be 1-{NUM_DICE}, got {idx}.")
        picked.add(idx - 1)
    return sum(1 << i for i in range(NUM_DICE) if i not in picked)


def ask(input_fn, output_fn, prompt, parse):
    while True:
        try:
            return parse(input_fn(prompt))
        except ValueError as e:
            output_fn(f"Invalid choice: {e}")


def play_turn(engine, input_fn, output_fn):
    while True:
        engine.dice.sort()
        output_fn("")
        output_fn(f"You rolled: {render_hand(engine.hand)}")

        if engine.rolls_left == 0:
            break
        output_fn(render_options(engine.open_options(), skip_zero=True))
        keep_mask = ask(input_fn, output_fn, REROLL_PROMPT, parse_reroll)
        if keep_mask == (1 << NUM_DICE) - 1:
            break
        engine.apply_action('keep', keep_mask)

    options = sorted_options(engine.open_options())
    output_fn(render_options(options, numbered=True))

    def parse_choice(text):
        idx = int(text)
        if not 1 <= idx <= len(options):
            raise ValueError(f"Pick a number between 1 and {len(options)}.")
        return options[idx - 1].category

    category = ask(input_fn, output_fn, RECORD_PROMPT, parse_choice)
    engine.apply_action('score', category)


def play_interactive(engine, input_fn=input, output_fn=print):
    while not engine.game_over:
        output_fn(render_scorecard(engine.scorecard))
        play_turn(engine, input_fn, output_fn)

    output_fn(render_scorecard(engine.scorecard))
    return engine.scorecard.score()


def watch_agent(engine, agent, output_fn=print):
    while not engine.game_over:
        action_type, action_val = agent.select_action(engine.get_mask(), engine)
        hand = render_hand(engine.hand)
        engine.apply_action(action_type, action_val)
        if action_type == 'score':
            output_fn(f"Turn {len(engine.scorecard):2}: {hand} -> {engine.scorecard.entries[-1]}")

    output_fn(render_scorecard(engine.scorecard))
    return engine.scorecard.score()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play the five-dice category game in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible dice")
    parser.add_argument("--agent", choices=sorted(AGENTS), default=None, help="Watch an agent play instead")
    args = parser.parse_args(argv)

    engine = GameEngine(face_source(args.seed))
    if args.agent:
        score = watch_agent(engine, AGENTS[args.agent]())
    else:
        score = play_interactive(engine)

    print(f"\nFinal score: {score.total}")


if __name__ == "__main__":
    main()
