import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shrinkball import const
from shrinkball.api.config import ConfigError, EngineConfig
from shrinkball.app.loop import run_game
from shrinkball.logging_config import setup_logging


def screen_size(value: str):
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, e.g. 1280x720, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shrinking Ball Launcher")
    parser.add_argument("--game", default=const.DEFAULT_GAME, help="Game folder name under games/")
    parser.add_argument("--screen", type=screen_size, default=(const.SCREEN_W, const.SCREEN_H),
                        help="Initial window size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=const.FPS, help="Target frame rate")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--fixed-size", action="store_true", help="Disable window resizing")
    parser.add_argument("--seed", type=int, help="Random seed for deterministic ball directions and colors")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        cfg = EngineConfig(
            screen_size=args.screen,
            fps=args.fps,
            mirror=args.mirror,
            resizable=not args.fixed_size,
            seed=args.seed,
        )
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    run_game(game_id=args.game, cfg=cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
