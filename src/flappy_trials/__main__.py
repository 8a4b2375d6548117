import argparse
import random

from .constants import ATTEMPT_LIMIT, DEFAULT_DIFFICULTY, DIFFICULTIES
from .round_controller import RoundController


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="flappy_trials", description="Flappy Trials arcade game")
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTIES), default=DEFAULT_DIFFICULTY)
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle placement.")
    parser.add_argument("--attempts", type=int, default=ATTEMPT_LIMIT, help="Attempts per player.")
    args = parser.parse_args(argv)

    if args.attempts < 1:
        parser.error("--attempts must be at least 1")

    # Imported here so the core stays usable without a display.
    from .flappy_client import FlappyClient

    controller = RoundController(
        difficulty=args.difficulty,
        attempt_limit=args.attempts,
        rng=random.Random(args.seed),
    )
    FlappyClient(controller).run()


if __name__ == "__main__":
    main()
