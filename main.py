"""Entry point for playing the artillery duel."""

import argparse
import logging

from artillery_duel import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Two-player artillery duel")
    parser.add_argument("--width", type=int, default=1280, help="playfield width in pixels")
    parser.add_argument("--height", type=int, default=720, help="playfield height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="seed for terrain and effects")
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
    run_pygame(width=args.width, height=args.height, seed=args.seed)


if __name__ == "__main__":
    main()
