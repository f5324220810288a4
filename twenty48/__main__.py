import argparse
import logging
import random
from typing import List, Optional

from twenty48 import __version__
from twenty48.engine import Game2048
from twenty48.session import GameSession


FRONTENDS = ("pygame", "tk")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="twenty48", description="2048 in Python")
    parser.add_argument("--frontend", choices=FRONTENDS, default="pygame",
                        help="window front-end to use (default: pygame)")
    parser.add_argument("--seed", type=int, default=None, help="seed for tile spawns")
    parser.add_argument("--log-level", default="WARNING", type=str.upper,
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"), help="logging level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_session(seed: Optional[int] = None) -> GameSession:
    return GameSession(Game2048(rng=random.Random(seed)))


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    session = build_session(args.seed)

    if args.frontend == "tk":
        from twenty48 import canvas_app as frontend
    else:
        from twenty48 import pygame_app as frontend
    frontend.run(session)


if __name__ == "__main__":
    main()
