"""
Entry point: python -m teeth_flappy [--sprite PATH] [--music PATH]
"""

import argparse
import logging
from pathlib import Path

from .constants import RENDER_FPS


def setup_logging(level: str) -> None:
    """Console logging for the game."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="teeth-flappy",
        description="Fly through toothed columns. SPACE / W / click = flap, R = (re)start, ESC = quit."
    )
    parser.add_argument("--sprite", type=Path, default=None, help="Bird image file")
    parser.add_argument("--music", type=Path, default=None, help="Looped background music file")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Frames (and game ticks) per second")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)

    # Imported late so --help works without opening a window
    from .flappy_client import FlappyClient

    client = FlappyClient(sprite_path=args.sprite, music_path=args.music, fps=args.fps)
    client.run()


if __name__ == "__main__":
    main()
