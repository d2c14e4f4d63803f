"""Entry point kept minimal by delegating to Engine.

Usage::

    smileys [-v] [--seed N] [--width W] [--height H]

Keys: arrows move the back smiley, space recolors both, q/Esc quits. Click
to move the front smiley.
"""

from __future__ import annotations

import argparse
import sys

from config import WIDTH, HEIGHT, VERBOSE
from core.backend import BackendError
from core.engine import Engine


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Two animated smileys in a resizable pygame window"
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=VERBOSE,
        help="Print events, ticks and sprite diagnostics",
    )
    ap.add_argument(
        "--seed", type=int, default=None, help="Random seed for color changes"
    )
    ap.add_argument("--width", type=int, default=WIDTH, help="Window width in pixels")
    ap.add_argument(
        "--height", type=int, default=HEIGHT, help="Window height in pixels"
    )
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        engine = Engine(
            size=(args.width, args.height), verbose=args.verbose, seed=args.seed
        )
    except BackendError as e:
        print(f"[Engine] {e}", file=sys.stderr)
        return 1
    engine.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
