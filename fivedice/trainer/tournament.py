import argparse
import time

import numpy as np
import pandas as pd

from fivedice.ai.baselines import GreedyAgent, RandomAgent
from fivedice.ai.expectimax import ExpectimaxAgent
from fivedice.ai.rule_based import RuleBasedAgent
from fivedice.game.categories import Category
from fivedice.trainer.evaluator import Evaluator, play_game


def default_agents(include_expectimax=True):
    agents = [RandomAgent(), GreedyAgent(), RuleBasedAgent()]
    if include_expectimax:
        agents.append(ExpectimaxAgent())
    return agents


def game_record(agent, game_id, engine, elapsed):
    score = engine.scorecard.score()
    return {
        "Agent": agent.name,
        "GameID": game_id,
        "Score": score.total,
        "Upper": score.upper,
        "Lower": score.lower,
        "Bonus": score.bonus,
        "FiveOfAKind": engine.scorecard.get_score(Category.FIVE_OF_A_KIND) > 0,
        "Time": elapsed,
    }


def run_tournament(agents, num_games=100, seed=None, verbose=True) -> pd.DataFrame:
    results = []
    seeds = Evaluator(seed).game_seeds(num_games)

    if verbose:
        print(f"Starting tournament ({num_games} games per agent)...")

    for agent in agents:
        if verbose:
            print(f"Running {agent.name}...")

        for i, game_seed in enumerate(seeds):
            start = time.time()
            engine = play_game(agent, game_seed)
            results.append(game_record(agent, i, engine, time.time() - start))

            if verbose:
                print(f"\r  Game {i+1}/{num_games} | Score: {results[-1]['Score']}", end="")

        if verbose:
            agent_scores = [r["Score"] for r in results if r["Agent"] == agent.name]
            print(f"\n  Average: {np.mean(agent_scores):.2f}")

    return pd.DataFrame(results)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    summary = df.groupby("Agent").agg(
        Games=("Score", "size"),
        Average=("Score", "mean"),
        Best=("Score", "max"),
        Worst=("Score", "min"),
        BonusRate=("Bonus", lambda b: (b > 0).mean()),
    )
    return summary.sort_values(by="Average", ascending=False)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run every agent for N games and save per-game results.")
    parser.add_argument("--games", type=int, default=100, help="Games per agent")
    parser.add_argument("--seed", type=int, default=None, help="Base seed; game i uses seed + i")
    parser.add_argument("--output", default="tournament_results.csv", help="CSV output path")
    parser.add_argument("--no-expectimax", action="store_true", help="Skip the slow expectimax agent")
    args = parser.parse_args(argv)

    df = run_tournament(default_agents(not args.no_expectimax), args.games, args.seed)
    df.to_csv(args.output, index=False)

    print(summarize(df))
    print(f"\nResults saved to {args.output}")
    return df


if __name__ == "__main__":
    main()
