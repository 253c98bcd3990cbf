#!/usr/bin/env python
"""CLI for the FunFacts true-or-false game."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from funfacts.config import create_from_config, get_default_config_path, load_config
from funfacts.data import GameFact, GameScore
from funfacts.scores import ScoreManager
from funfacts.session import GameSession
from funfacts.source import PrefetchingFactSource

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["fact", "play", "scores", "delete", "clear"]
    config: Path
    rounds: int = Field(default=10, ge=1)
    score_id: str | None = None
    verbose: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @model_validator(mode="after")
    def delete_needs_score_id(self) -> "CLIArgs":
        if self.command == "delete" and not self.score_id:
            raise ValueError("delete requires a score id")
        return self


def _describe_fact(fact: GameFact) -> str:
    category = f" [{fact.category}]" if fact.category else ""
    return f"{fact.text}{category}"


def _describe_score(rank: int, score: GameScore) -> str:
    return (
        f"{rank:>3}. {score.percentage:>3}%  {score.correct}/{score.total}  "
        f"composite {score.composite_score:.2f}  {score.date}  ({score.id})"
    )


def _ask(prompt: str) -> bool | None:
    """Read a true/false answer; None means quit."""
    while True:
        reply = input(prompt).strip().lower()
        if reply in ("t", "true", "y", "yes"):
            return True
        if reply in ("f", "false", "n", "no"):
            return False
        if reply in ("q", "quit", ""):
            return None
        print("Please answer t(rue), f(alse) or q(uit).")


async def play(fact_source: PrefetchingFactSource, scores: ScoreManager, rounds: int) -> None:
    session = GameSession(fact_source, scores)
    fact = await session.start()

    for round_no in range(1, rounds + 1):
        print(f"\nRound {round_no}/{rounds}: {_describe_fact(fact)}")
        guess = await asyncio.to_thread(_ask, "True or false? ")
        if guess is None:
            break
        correct = await session.answer(guess)
        verdict = "Correct!" if correct else "Wrong."
        print(f"{verdict} It's {'true' if fact.truth_value else 'false'}.")
        if fact.explanation:
            print(f"  {fact.explanation}")
        print(f"Score: {session.correct}/{session.total}")
        if round_no < rounds:
            fact = await session.next()

    result = await session.end()
    final = result.final_score
    print(f"\nFinal: {final.correct}/{final.total} ({final.percentage}%)")
    if result.is_new_high_score:
        print("New high score!")


async def show_scores(scores: ScoreManager) -> None:
    stats = await scores.get_score_stats()
    if stats.highest_score:
        print(f"Best: {_describe_score(1, stats.highest_score)}")
    if stats.current_score:
        current = stats.current_score
        print(f"Unfinished game: {current.correct}/{current.total}")
    if not stats.all_scores:
        print("No games completed yet.")
        return
    print("\nHistory:")
    for rank, score in enumerate(stats.all_scores, 1):
        print(_describe_score(rank, score))


async def run(args: CLIArgs) -> None:
    """Execute the requested command with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    if not args.verbose:
        logging.getLogger().setLevel(config.logging.level)
    fact_source, scores = create_from_config(config)

    try:
        if args.command == "fact":
            fact = await fact_source.next_fact()
            print(_describe_fact(fact))
            print(f"Answer: {'true' if fact.truth_value else 'false'}")
            if fact.explanation:
                print(fact.explanation)
        elif args.command == "play":
            await fact_source.start()
            await play(fact_source, scores, args.rounds)
        elif args.command == "scores":
            await show_scores(scores)
        elif args.command == "delete":
            await scores.delete_score(args.score_id or "")
            logger.info(f"Deleted score {args.score_id}")
        elif args.command == "clear":
            await scores.clear_all_scores()
            logger.info("Cleared all scores")
    finally:
        await fact_source.aclose()


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Guess whether fun facts are true or false.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("fact", help="Print one fact and its answer")
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--rounds", "-n", type=int, default=10, help="Rounds to play")
    subparsers.add_parser("scores", help="Show score history")
    delete_parser = subparsers.add_parser("delete", help="Delete one score")
    delete_parser.add_argument("score_id", help="Id of the score to delete")
    subparsers.add_parser("clear", help="Delete all scores")

    ns = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(message)s",
    )
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            rounds=getattr(ns, "rounds", 10),
            score_id=getattr(ns, "score_id", None),
            verbose=ns.verbose,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
