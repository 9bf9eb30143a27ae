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

from engine.app.loop import run_game


def main():
    parser = argparse.ArgumentParser(description="Tap Platform Launcher")
    parser.add_argument("--game", required=True, help="Game folder name under games/")
    parser.add_argument("--screen", default="1280x720", help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--profile", default="default", help="Progress profile name (runtime/cache/progress/<profile>.json)")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    w, h = map(int, args.screen.lower().split("x"))

    run_game(
        game_id=args.game,
        screen_size=(w, h),
        fps=args.fps,
        profile=args.profile,
        mirror=args.mirror,
    )


if __name__ == "__main__":
    main()
