"""Entry point for playing the Gorillas artillery game."""

import argparse
import logging

from gorillas_game import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Gorillas skyline duel")
    parser.add_argument("--seed", type=int, default=None, help="seed the skyline generator")
    parser.add_argument("--width", type=int, default=None, help="initial window width")
    parser.add_argument("--height", type=int, default=None, help="initial window height")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    window_size = None
    if args.width and args.height:
        window_size = (args.width, args.height)
    run_pygame(seed=args.seed, window_size=window_size)


if __name__ == "__main__":
    main()
