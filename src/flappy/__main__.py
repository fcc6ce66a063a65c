#!/usr/bin/env python3
"""
Run the game: python -m flappy
"""

import argparse
from pathlib import Path

from .constants import DB_FILE, DEFAULT_DISPLAY_HEIGHT
from .logger import setup_logging


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Bird.")
    parser.add_argument("--height", type=int, default=DEFAULT_DISPLAY_HEIGHT,
                        help="Window height in pixels; width follows the aspect ratio.")
    parser.add_argument("--db", default=DB_FILE, help="SQLite file holding the best score.")
    parser.add_argument("--assets", type=Path, default=None,
                        help="Directory with img/sprite_sheet.png and audio/*.wav.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe placement.")
    parser.add_argument("--log-level", default="info")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    setup_logging(args.log_level)

    # pygame is only needed once we actually open a window.
    from .flappy_client import FlappyClient

    print("Space / Click = Flap | P = Pause | N = Night | Esc = Quit")
    client = FlappyClient(display_height=args.height, db_file=args.db,
                          assets_dir=args.assets, seed=args.seed)
    try:
        client.run()
    except KeyboardInterrupt:
        print("Interrupted.")


if __name__ == "__main__":
    main()
